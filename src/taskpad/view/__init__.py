"""Rendering: pure view model (renderer.py) and terminal text (text_view.py)."""
