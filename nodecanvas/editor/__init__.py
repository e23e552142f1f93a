from .EditorSession import EditorSession, start_editor

__all__ = ["EditorSession", "start_editor"]
