"""
Tests for language definitions and hint provider registration.
"""

from pathlib import Path

from xqueryls.hints.provider import HintProvider
from xqueryls.hints.registry import HintProviderRegistry
from xqueryls.language import XQUERY_LANGUAGE_ID, LanguageRegistry, xquery_language


class StubProvider(HintProvider):
    def has_hints(self, editor, last_char):
        return False

    async def get_hints(self, last_char):
        return None

    def insert_hint(self, hint):
        return False


def test_xquery_language_definition():
    language = xquery_language()

    assert language.id == XQUERY_LANGUAGE_ID
    assert language.name == "XQuery"
    assert language.mode == "xquery"
    assert language.file_extensions == ("xqy",)
    assert language.line_comment == ("(:", ":)")
    assert language.block_comment == ("(:", ":)")


def test_define_language_is_idempotent():
    languages = LanguageRegistry()

    first = languages.define_language(xquery_language(["xqy"]))
    second = languages.define_language(xquery_language(["xq"]))

    assert second is first
    assert languages.get(XQUERY_LANGUAGE_ID).file_extensions == ("xqy",)


def test_language_for_path():
    languages = LanguageRegistry()
    languages.define_language(xquery_language(["xqy", "xq"]))

    assert languages.language_for_path(Path("/p/main.xqy")).id == XQUERY_LANGUAGE_ID
    assert languages.language_for_path(Path("lib.xq")).id == XQUERY_LANGUAGE_ID
    assert languages.language_for_path(Path("main.xsl")) is None
    assert LanguageRegistry().language_for_path(Path("main.xqy")) is None


def test_providers_sorted_by_priority_then_registration():
    registry = HintProviderRegistry()
    late, early, tied = StubProvider(), StubProvider(), StubProvider()

    registry.register(late, ["xquery"], priority=10)
    registry.register(early, ["xquery"], priority=-1)
    registry.register(tied, ["xquery"], priority=10)

    assert registry.providers_for("xquery") == [early, late, tied]


def test_providers_filtered_by_language():
    registry = HintProviderRegistry()
    xquery, xslt = StubProvider(), StubProvider()
    registry.register(xquery, ["xquery"])
    registry.register(xslt, ["xslt"])

    assert registry.providers_for("xquery") == [xquery]
    assert registry.providers_for("css") == []


def test_registering_twice_is_ignored():
    registry = HintProviderRegistry()
    provider = StubProvider()

    registry.register(provider, ["xquery"])
    registry.register(provider, ["xquery"], priority=-5)

    assert registry.all_providers() == [provider]
