"""
Speech to Text streaming message models.
"""

from services.speech_to_text.models import SpeechToTextStart, SpeechToTextStop

__all__ = ["SpeechToTextStart", "SpeechToTextStop"]
