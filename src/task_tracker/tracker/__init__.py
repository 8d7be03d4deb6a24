"""Task tracker components.

Provides:
- the `Task` model and the in-memory `TaskStore`
- the `TaskBoard` front end
- settings, structured logging and a small CLI surface
"""
