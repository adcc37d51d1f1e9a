from taquin.engine.playback.playback import apply_moves, replay

__all__ = ["apply_moves", "replay"]
