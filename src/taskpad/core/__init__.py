"""
Core state and event handling.

Components:
- state.py: AppState and the add-task form draft
- edit_modal.py: edit dialog state machine
- controller.py: event dispatch table + re-render
- ports.py / errors.py: storage protocol and error taxonomy
"""
