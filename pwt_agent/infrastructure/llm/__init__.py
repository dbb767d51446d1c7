from .openai_compatible import OpenAIStepProvider

__all__ = ["OpenAIStepProvider"]
