"""
test_language.py - Locale parsing and target language lookup
"""

import unittest

from gtrans.errors import ConfigError
from gtrans.language import detect_target_lang, lang_code_from_locale


class TestLangCodeFromLocale(unittest.TestCase):
    def test_region_is_dropped(self):
        self.assertEqual(lang_code_from_locale("en_US.UTF-8"), "en")
        self.assertEqual(lang_code_from_locale("ja_JP"), "ja")

    def test_simplified_chinese(self):
        self.assertEqual(lang_code_from_locale("zh_CN.UTF-8"), "zh-CN")
        self.assertEqual(lang_code_from_locale("zh_SG"), "zh-CN")

    def test_traditional_chinese(self):
        self.assertEqual(lang_code_from_locale("zh_TW"), "zh-TW")
        self.assertEqual(lang_code_from_locale("zh_HK.Big5"), "zh-TW")

    def test_unresolved(self):
        self.assertEqual(lang_code_from_locale("fr"), "")
        self.assertEqual(lang_code_from_locale("C.UTF-8"), "")
        self.assertEqual(lang_code_from_locale(""), "")


class TestDetectTargetLang(unittest.TestCase):
    def test_flag_wins(self):
        env = {"GOOGLE_TRANSLATE_LANG": "fr", "LANG": "en_US.UTF-8"}
        self.assertEqual(detect_target_lang("de", env), "de")

    def test_explicit_env_before_locale(self):
        env = {"GOOGLE_TRANSLATE_LANG": "fr", "LANGUAGE": "ja_JP.UTF-8"}
        self.assertEqual(detect_target_lang("", env), "fr")

    def test_language_env(self):
        self.assertEqual(detect_target_lang("", {"LANGUAGE": "ja_JP.UTF-8"}), "ja")

    def test_locale_precedence(self):
        env = {"LANGUAGE": "", "LC_ALL": "de_DE.UTF-8", "LANG": "en_US.UTF-8"}
        self.assertEqual(detect_target_lang("", env), "de")

    def test_unresolvable_locale_is_skipped(self):
        env = {"LANGUAGE": "C", "LC_ALL": "POSIX", "LANG": "zh_HK.UTF-8"}
        self.assertEqual(detect_target_lang("", env), "zh-TW")

    def test_nothing_set(self):
        with self.assertRaises(ConfigError) as cm:
            detect_target_lang("", {"LANG": "C"})
        self.assertIn("GOOGLE_TRANSLATE_LANG", str(cm.exception))
        self.assertIn("$LANG", str(cm.exception))


if __name__ == '__main__':
    unittest.main()
