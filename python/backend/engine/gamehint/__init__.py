from backend.engine.gamehint.hint import HintRevealer, Reveal

__all__ = ["HintRevealer", "Reveal"]
