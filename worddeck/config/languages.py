"""Language-specific configurations."""

LANG_CONFIG = {
    "EN": {
        "label": "English",
        "speech_tag": "en-US",
        "voice": "en-US-AriaNeural",
        "available_voices": [
            "en-US-AriaNeural",
            "en-US-GuyNeural",
            "en-US-JennyNeural",
            "en-US-ChristopherNeural",
        ],
    },
    "ID": {
        "label": "Bahasa Indonesia",
        "speech_tag": "id-ID",
        "voice": "id-ID-GadisNeural",
        "available_voices": [
            "id-ID-GadisNeural",
            "id-ID-ArdiNeural",
        ],
    },
}


def get_language_by_tag(speech_tag: str) -> dict:
    """
    Find the language entry whose speech tag matches ``speech_tag``.

    Matching is case-insensitive and falls back to the primary subtag,
    so "en-GB" still resolves to the English entry.

    Returns:
        The language settings dict, or an empty dict if nothing matches
    """
    tag = (speech_tag or "").lower()
    for settings in LANG_CONFIG.values():
        if settings["speech_tag"].lower() == tag:
            return settings

    primary = tag.split("-")[0]
    for settings in LANG_CONFIG.values():
        if settings["speech_tag"].lower().split("-")[0] == primary:
            return settings
    return {}
