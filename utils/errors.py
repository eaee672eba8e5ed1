class SceneError(Exception):
    """Base error for scene loading and rendering."""


class UnknownSceneError(SceneError):
    """Scene id is not one of the configured scenes."""


class SceneDataError(SceneError):
    """CSV is missing, unreadable, or lacks the required columns."""


class EmptySeriesError(SceneError):
    """No usable rows left to draw."""
