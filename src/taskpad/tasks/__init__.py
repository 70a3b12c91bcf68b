"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskFilter)
- task_ids.py: monotonic timestamp id factory
- task_store.py: in-memory collection persisted to one storage slot
"""
