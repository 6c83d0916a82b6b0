"""
Resolve the target language from the command line or the environment.

Lookup order:
    1. the -to flag
    2. GOOGLE_TRANSLATE_LANG
    3. LANGUAGE, LC_ALL, LANG (POSIX locale strings such as en_US.UTF-8)
"""

from __future__ import annotations

import logging
import os
from typing import Mapping

from gtrans.errors import ConfigError

logger = logging.getLogger(__name__)

LANG_ENV = "GOOGLE_TRANSLATE_LANG"
LOCALE_ENVS = ("LANGUAGE", "LC_ALL", "LANG")

# Regions written in Simplified / Traditional Chinese.
SIMPLIFIED_CHINESE = ("zh_CN", "zh_SG")
TRADITIONAL_CHINESE = ("zh_TW", "zh_HK")


def lang_code_from_locale(locale: str) -> str:
    """Map a locale string to a language code, or "" when it has no region part."""
    if locale.startswith(SIMPLIFIED_CHINESE):
        return "zh-CN"
    if locale.startswith(TRADITIONAL_CHINESE):
        return "zh-TW"

    lang, sep, _ = locale.partition("_")
    if not sep:
        return ""
    return lang


def detect_target_lang(flag: str = "", environ: Mapping[str, str] | None = None) -> str:
    if flag:
        return flag

    env = os.environ if environ is None else environ
    code = env.get(LANG_ENV, "")
    if code:
        logger.debug("Target language %r from %s", code, LANG_ENV)
        return code

    for name in LOCALE_ENVS:
        code = lang_code_from_locale(env.get(name, ""))
        if code:
            logger.debug("Target language %r from %s", code, name)
            return code

    raise ConfigError(
        "cannot detect language. Please export $LANG or $GOOGLE_TRANSLATE_LANG (e.g. en, ja)"
    )
