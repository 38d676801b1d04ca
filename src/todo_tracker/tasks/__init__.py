"""
Task subsystem.

Components:
- task_models.py: data structures (TaskRecord, TaskStatus)
- task_store.py: JSON-file storage (full load / full rewrite)
- due_dates.py: parsing and rendering of due dates
"""
