"""Mode table for the cleanup stage."""

from collections.abc import Mapping

from voicetidy.domain.models import CleanupMode, CleanupProfile

FILLER_REMOVAL_PROMPT = (
    "You are a text cleanup assistant. Remove filler words (um, uh, like, you "
    "know, etc.), fix grammar, improve readability, and format the text nicely "
    "while preserving the original meaning and tone. Keep the text concise but "
    "natural. Do not add content that wasn't in the original text. Respond with "
    "only the cleaned text."
)

GENERAL_ASSISTANT_PROMPT = (
    "You are a helpful assistant who gives brief, information dense answers."
)

FILLER_REMOVAL_TEMPLATE = "Please clean up and format this transcribed text:\n\n{text}"


def build_cleanup_profiles(
    models: Mapping[CleanupMode, str],
) -> dict[CleanupMode, CleanupProfile]:
    """
    Builds the mode table for the given per-mode model ids.

    Args:
        models: Model identifier to use for each cleanup mode.

    Returns:
        One CleanupProfile per CleanupMode.
    """
    return {
        CleanupMode.FILLER_REMOVAL: CleanupProfile(
            model=models[CleanupMode.FILLER_REMOVAL],
            system_prompt=FILLER_REMOVAL_PROMPT,
            temperature=0.3,
            user_template=FILLER_REMOVAL_TEMPLATE,
        ),
        CleanupMode.GENERAL_ASSISTANT: CleanupProfile(
            model=models[CleanupMode.GENERAL_ASSISTANT],
            system_prompt=GENERAL_ASSISTANT_PROMPT,
            temperature=1.0,
        ),
    }
