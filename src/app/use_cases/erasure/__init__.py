"""Use cases de privacidade (Right to Erasure)."""

from .process_erasure_request import ProcessErasureRequestUseCase

__all__ = ["ProcessErasureRequestUseCase"]
