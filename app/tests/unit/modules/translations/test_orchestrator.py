"""Tests for modules.translations.orchestrator."""

import json

import pytest

from modules.translations.domain import (
    ConfigurationError,
    FileType,
    InvalidKeysError,
    TranslationProviderError,
)
from modules.translations.loader import build_translation_file
from modules.translations.matchers import NoMatcher
from modules.translations.orchestrator import (
    compute_diff,
    merge_content,
    render_document,
)
from modules.translations.providers import DryRunProvider


def read(root, language, name):
    return json.loads((root / language / name).read_text(encoding="utf-8"))


@pytest.mark.unit
class TestComputeDiff:
    """Tests for compute_diff."""

    def test_new_target_needs_every_key(self):
        template = build_translation_file("a.json", {"x": "X", "y": {"z": "Z"}})

        diff = compute_diff(template, None)

        assert [(s.key, s.value) for s in diff.strings_to_translate] == [
            ("x", "X"),
            ("y.z", "Z"),
        ]
        assert diff.unused_strings == []

    def test_existing_keys_are_not_translated_again(self):
        template = build_translation_file("a.json", {"x": "X", "y": "Y"})
        existing = build_translation_file("a.json", {"y": "Yy", "old": "O"})

        diff = compute_diff(template, existing)

        assert [s.key for s in diff.strings_to_translate] == ["x"]
        assert diff.unused_strings == ["old"]

    def test_natural_files_submit_the_key(self):
        template = build_translation_file("a.json", {"Save it": "Save"})

        diff = compute_diff(template, None)

        assert diff.strings_to_translate[0].value == "Save it"

    def test_array_values_are_submitted_encoded(self):
        template = build_translation_file("a.json", {"days": ["Mon", "Tue"]})

        diff = compute_diff(template, None)

        assert diff.strings_to_translate[0].value == "Mon <sep /> Tue"

    def test_diff_partitions_both_key_sets(self):
        template = build_translation_file("a.json", {"a": "1", "b": "2", "c": "3"})
        existing = build_translation_file("a.json", {"b": "x", "d": "y"})

        diff = compute_diff(template, existing)
        missing = {s.key for s in diff.strings_to_translate}
        shared = set(template.keys) & set(existing.keys)

        assert missing | shared == set(template.keys)
        assert set(diff.unused_strings) | shared == set(existing.keys)
        assert missing & shared == set()


@pytest.mark.unit
class TestMergeAndRender:
    """Tests for merge_content and render_document."""

    def test_merge_appends_new_strings(self):
        merged = merge_content({"a": "1", "b": "2"}, {"c": "3"})
        assert list(merged.items()) == [("a", "1"), ("b", "2"), ("c", "3")]

    def test_merge_removes_unused_strings(self):
        assert merge_content({"a": "1", "b": "2"}, {}, ["b"]) == {"a": "1"}

    def test_render_key_based_renests_and_splits_arrays(self):
        template = build_translation_file("a.json", {"m": {"days": ["Mon"]}})

        document = render_document(
            template, None, {"m.days": "Lun <sep /> Mar"}, ["m.days"]
        )

        assert document == {"m": {"days": ["Lun", "Mar"]}}

    def test_render_splits_existing_values_by_their_own_shape(self):
        template = build_translation_file("a.json", {"days": ["Mon"], "tag": "T"})
        existing = build_translation_file(
            "a.json", {"days": "Lun <sep /> Mar", "tag": ["x"]}
        )
        content = {"days": "Lun <sep /> Mar", "tag": "x"}

        document = render_document(template, existing, content)

        assert document == {"days": "Lun <sep /> Mar", "tag": ["x"]}

    def test_render_natural_stays_flat(self):
        template = build_translation_file("a.json", {"Save it": "Save it"})

        assert render_document(template, None, {"Save it": "Sauver"}) == {
            "Save it": "Sauver"
        }


@pytest.mark.unit
class TestSyncOrchestrator:
    """Tests for SyncOrchestrator.run."""

    @pytest.mark.asyncio
    async def test_translates_new_key_based_target(
        self, make_languages, make_orchestrator
    ):
        root = make_languages(
            {
                "en": {
                    "common.json": {
                        "greeting": "Hello {name}",
                        "menu": {"open": "Open", "close": "Close"},
                    }
                },
                "fr": {},
            }
        )

        report = await make_orchestrator(root).run()

        assert read(root, "fr", "common.json") == {
            "greeting": "fr:Hello {name}",
            "menu": {"open": "fr:Open", "close": "fr:Close"},
        }
        assert report.translated_count == 3
        assert report.languages[0].files[0].written is True

    @pytest.mark.asyncio
    async def test_only_missing_keys_are_translated(
        self, make_languages, make_orchestrator, fake_provider
    ):
        root = make_languages(
            {
                "en": {"common.json": {"greeting": "Hello", "bye": "Bye"}},
                "fr": {"common.json": {"greeting": "Bonjour"}},
            }
        )

        await make_orchestrator(root).run()

        assert fake_provider.requests == [["bye"]]
        assert read(root, "fr", "common.json") == {
            "greeting": "Bonjour",
            "bye": "fr:Bye",
        }

    @pytest.mark.asyncio
    async def test_one_provider_call_per_file_and_language(
        self, make_languages, make_orchestrator, fake_provider
    ):
        root = make_languages(
            {
                "en": {"a.json": {"x": "X", "y": "Y"}, "b.json": {"z": "Z"}},
                "de": {},
                "fr": {},
            }
        )

        await make_orchestrator(root).run()

        assert fake_provider.requests == [["x", "y"], ["z"], ["x", "y"], ["z"]]
        assert read(root, "de", "b.json") == {"z": "de:Z"}

    @pytest.mark.asyncio
    async def test_unused_strings_are_kept_by_default(
        self, make_languages, make_orchestrator
    ):
        root = make_languages(
            {
                "en": {"common.json": {"greeting": "Hello"}},
                "fr": {"common.json": {"greeting": "Bonjour", "old": "Vieux"}},
            }
        )

        report = await make_orchestrator(root).run()

        assert read(root, "fr", "common.json") == {
            "greeting": "Bonjour",
            "old": "Vieux",
        }
        assert report.languages[0].removed == 0

    @pytest.mark.asyncio
    async def test_unused_strings_are_deleted_on_request(
        self, make_languages, make_orchestrator
    ):
        root = make_languages(
            {
                "en": {"common.json": {"menu": {"open": "Open"}}},
                "fr": {
                    "common.json": {
                        "menu": {"open": "Ouvrir", "old": "Vieux"},
                        "gone": "Parti",
                    }
                },
            }
        )

        report = await make_orchestrator(root, delete_unused_strings=True).run()

        assert read(root, "fr", "common.json") == {"menu": {"open": "Ouvrir"}}
        assert report.languages[0].removed == 2

    @pytest.mark.asyncio
    async def test_unused_files_are_deleted_on_request(
        self, make_languages, make_orchestrator
    ):
        root = make_languages(
            {
                "en": {"common.json": {"a": "A"}},
                "fr": {"common.json": {"a": "Un"}, "legacy.json": {"b": "B"}},
            }
        )

        await make_orchestrator(root, delete_unused_strings=True).run()

        assert not (root / "fr" / "legacy.json").exists()

    @pytest.mark.asyncio
    async def test_natural_files(self, make_languages, make_orchestrator):
        root = make_languages(
            {
                "en": {"app.json": {"Save file": "Save file", "Done.": "Done."}},
                "fr": {"app.json": {"Save file": "Enregistrer"}},
            }
        )

        await make_orchestrator(root).run()

        assert read(root, "fr", "app.json") == {
            "Save file": "Enregistrer",
            "Done.": "fr:Done.",
        }

    @pytest.mark.asyncio
    async def test_arrays_keep_their_shape(self, make_languages, make_orchestrator):
        root = make_languages(
            {"en": {"a.json": {"days": ["Mon", "Tue"], "none": []}}, "fr": {}}
        )

        await make_orchestrator(root).run()

        assert read(root, "fr", "a.json") == {
            "days": ["fr:Mon", "Tue"],
            "none": [],
        }

    @pytest.mark.asyncio
    async def test_non_text_leaves_are_copied(
        self, make_languages, make_orchestrator, fake_provider
    ):
        root = make_languages(
            {"en": {"a.json": {"count": 3, "blank": "", "label": "Hi"}}, "fr": {}}
        )

        await make_orchestrator(root).run()

        assert fake_provider.requests == [["label"]]
        assert read(root, "fr", "a.json") == {
            "count": 3,
            "blank": "",
            "label": "fr:Hi",
        }

    @pytest.mark.asyncio
    async def test_object_arrays_in_targets_are_untouched(
        self, make_languages, make_orchestrator, fake_provider
    ):
        faq = [{"q": "Why?", "a": "Because."}]
        root = make_languages(
            {
                "en": {
                    "a.json": {"faq": faq, "nums": [1, 2], "title": "T", "more": "M"}
                },
                "fr": {"a.json": {"faq": faq, "nums": [1, 2], "title": "Titre"}},
            }
        )

        await make_orchestrator(root).run()

        assert fake_provider.requests == [["more"]]
        assert read(root, "fr", "a.json") == {
            "faq": faq,
            "nums": [1, 2],
            "title": "Titre",
            "more": "fr:M",
        }

    @pytest.mark.asyncio
    async def test_object_arrays_are_never_sent(
        self, make_languages, make_orchestrator, fake_provider
    ):
        root = make_languages({"en": {"a.json": {"faq": [{"q": "Why?"}]}}, "fr": {}})

        await make_orchestrator(root).run()

        assert fake_provider.requests == [[]]
        assert fake_provider.batches == []
        assert read(root, "fr", "a.json") == {"faq": [{"q": "Why?"}]}

    @pytest.mark.asyncio
    async def test_rerun_writes_nothing(
        self, make_languages, make_orchestrator, fake_provider
    ):
        root = make_languages(
            {
                "en": {
                    "a.json": {"m": {"x": "X"}, "days": ["Mon", "Tue"]},
                    "b.json": {"Save file": "Save file"},
                },
                "fr": {},
            }
        )
        await make_orchestrator(root).run()
        fake_provider.requests.clear()

        report = await make_orchestrator(root).run()

        assert fake_provider.requests == [[], []]
        assert report.translated_count == 0
        assert not any(f.written for f in report.languages[0].files)

    @pytest.mark.asyncio
    async def test_dry_run_writes_nothing(self, make_languages, make_orchestrator):
        root = make_languages(
            {
                "en": {"common.json": {"a": "A"}, "app.json": {"Save it": "Save"}},
                "fr": {"old.json": {"b": "B"}},
            }
        )
        provider = DryRunProvider()
        provider.initialize(None, NoMatcher())

        report = await make_orchestrator(
            root,
            provider=provider,
            delete_unused_strings=True,
            fix_inconsistencies=True,
        ).run()

        assert report.dry_run is True
        assert report.translated_count == 2
        assert report.fixed_files == ["app.json"]
        assert sorted(p.name for p in (root / "fr").iterdir()) == ["old.json"]
        assert read(root, "en", "app.json") == {"Save it": "Save"}

    @pytest.mark.asyncio
    async def test_unsupported_target_is_skipped(
        self, make_languages, make_orchestrator, make_provider
    ):
        root = make_languages(
            {"en": {"a.json": {"x": "X"}}, "fr": {}, "tlh": {}}
        )
        provider = make_provider(languages=["en", "fr"])

        report = await make_orchestrator(root, provider=provider).run()

        assert report.skipped_languages == ["tlh"]
        assert list((root / "tlh").iterdir()) == []
        assert read(root, "fr", "a.json") == {"x": "fr:X"}

    @pytest.mark.asyncio
    async def test_language_codes_compare_case_insensitively(
        self, make_languages, make_orchestrator, make_provider
    ):
        root = make_languages({"en": {"a.json": {"x": "X"}}, "pt-BR": {}})
        provider = make_provider(languages=["EN", "pt-br"])

        report = await make_orchestrator(root, provider=provider).run()

        assert report.skipped_languages == []
        assert read(root, "pt-BR", "a.json") == {"x": "pt-BR:X"}

    @pytest.mark.asyncio
    async def test_unsupported_source_stops_before_writing(
        self, make_languages, make_orchestrator, make_provider
    ):
        root = make_languages({"en": {"a.json": {"x": "X"}}, "fr": {}})
        provider = make_provider(languages=["fr"])

        with pytest.raises(ConfigurationError, match="source language en"):
            await make_orchestrator(root, provider=provider).run()
        assert list((root / "fr").iterdir()) == []

    @pytest.mark.asyncio
    async def test_missing_source_language(self, make_languages, make_orchestrator):
        root = make_languages({"fr": {}})

        with pytest.raises(ConfigurationError, match="doesn't exist"):
            await make_orchestrator(root).run()

    @pytest.mark.asyncio
    async def test_empty_source_language(self, make_languages, make_orchestrator):
        root = make_languages({"en": {}, "fr": {}})

        with pytest.raises(ConfigurationError, match="any JSON files"):
            await make_orchestrator(root).run()

    @pytest.mark.asyncio
    async def test_invalid_keys_stop_the_run(
        self, make_languages, make_orchestrator, fake_provider
    ):
        root = make_languages({"en": {"a.json": {"a.b": "X"}}, "fr": {}})

        with pytest.raises(InvalidKeysError) as exc:
            await make_orchestrator(root, file_type=FileType.KEY_BASED).run()

        assert exc.value.invalid_keys == {"a.json": ["a.b"]}
        assert fake_provider.requests == []
        assert list((root / "fr").iterdir()) == []

    @pytest.mark.asyncio
    async def test_inconsistencies_are_reported(
        self, make_languages, make_orchestrator
    ):
        root = make_languages(
            {"en": {"app.json": {"Save it": "Save", "Done.": "Done."}}, "fr": {}}
        )

        report = await make_orchestrator(root).run()

        assert report.inconsistent_files == {"app.json": ["Save it"]}
        assert report.fixed_files == []
        assert read(root, "en", "app.json") == {"Save it": "Save", "Done.": "Done."}

    @pytest.mark.asyncio
    async def test_inconsistencies_are_fixed_on_request(
        self, make_languages, make_orchestrator
    ):
        root = make_languages(
            {"en": {"app.json": {"Save it": "Save", "Done.": "Done."}}, "fr": {}}
        )

        report = await make_orchestrator(root, fix_inconsistencies=True).run()

        assert report.fixed_files == ["app.json"]
        assert read(root, "en", "app.json") == {
            "Save it": "Save it",
            "Done.": "Done.",
        }
        assert read(root, "fr", "app.json") == {
            "Save it": "fr:Save it",
            "Done.": "fr:Done.",
        }

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(
        self, make_languages, make_orchestrator, fake_provider
    ):
        root = make_languages({"en": {"a.json": {"x": "X"}}, "fr": {}})

        async def fail(texts, source_language, target_language):
            raise TranslationProviderError("quota exceeded")

        fake_provider._translate_batch = fail

        with pytest.raises(TranslationProviderError, match="quota exceeded"):
            await make_orchestrator(root).run()
        assert not (root / "fr" / "a.json").exists()

    @pytest.mark.asyncio
    async def test_dotted_natural_keys_with_deletion(
        self, make_languages, make_orchestrator, fake_provider
    ):
        root = make_languages(
            {
                "en": {"app.json": {"a.b": "x", "a.c": "y"}},
                "fr": {"app.json": {"a.b": "x2", "old.key": "z"}},
            }
        )

        report = await make_orchestrator(root, delete_unused_strings=True).run()

        assert fake_provider.requests == [["a.c"]]
        assert read(root, "fr", "app.json") == {"a.b": "x2", "a.c": "fr:a.c"}
        assert report.inconsistent_files == {"app.json": ["a.b", "a.c"]}

    @pytest.mark.asyncio
    async def test_failure_keeps_languages_written_before(
        self, make_languages, make_orchestrator, fake_provider
    ):
        root = make_languages({"en": {"a.json": {"x": "X"}}, "de": {}, "fr": {}})

        async def fail_for_french(texts, source_language, target_language):
            if target_language == "fr":
                raise TranslationProviderError("quota exceeded")
            return [f"{target_language}:{text}" for text in texts]

        fake_provider._translate_batch = fail_for_french

        with pytest.raises(TranslationProviderError, match="quota exceeded"):
            await make_orchestrator(root).run()
        assert read(root, "de", "a.json") == {"x": "de:X"}
        assert not (root / "fr" / "a.json").exists()
