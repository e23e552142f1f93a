from .recording import RecordingRenderAdapter

__all__ = ["RecordingRenderAdapter"]
