"""
Test Suite: Industry Catalog

Tests the fixed profile catalog, lookups and compiled matchers.
"""

import pytest

from src.industry import (
    CATALOG_VERSION,
    INDUSTRY_PROFILES,
    IndustryCatalog,
    IndustryProfile,
    all_profiles,
    get_catalog,
    profile_by_id,
)
from src.industry.matching import (
    clamp,
    compile_term,
    compile_terms,
    count_matches,
    matched_terms,
    round_half_up,
    word_count,
)


class TestCatalogContents:
    """Test the shipped profiles."""

    def test_declaration_order(self, catalog):
        assert catalog.ids() == [
            "ecommerce", "healthcare", "fintech", "manufacturing", "automotive", "it",
        ]

    def test_ids_are_unique(self, catalog):
        ids = catalog.ids()
        assert len(ids) == len(set(ids))

    def test_every_profile_is_complete(self, catalog):
        for p in catalog.all_profiles():
            assert p.name, p.id
            assert p.keywords, p.id
            assert p.technologies, p.id
            assert p.regulations, p.id
            assert p.kpis, p.id
            assert p.focus_areas, p.id

    def test_module_level_helpers(self):
        assert all_profiles() == INDUSTRY_PROFILES
        assert profile_by_id("fintech").name == "Fintech & Banking"
        assert profile_by_id("aerospace") is None

    def test_lookup_is_case_sensitive(self, catalog):
        assert catalog.profile_by_id("FinTech") is None

    def test_catalog_is_a_singleton(self):
        assert get_catalog() is get_catalog()
        assert get_catalog().version == CATALOG_VERSION

    def test_len_and_iteration(self, catalog):
        assert len(catalog) == 6
        assert [p.id for p in catalog] == catalog.ids()


class TestCatalogValidation:
    """Test construction of custom catalogs."""

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError):
            IndustryCatalog([])

    def test_duplicate_ids_rejected(self):
        first = INDUSTRY_PROFILES[0]
        with pytest.raises(ValueError, match="ecommerce"):
            IndustryCatalog([first, first])

    def test_compiled_matchers_are_reused(self, catalog):
        fintech = catalog.profile_by_id("fintech")
        assert catalog.compiled(fintech) is catalog.compiled(fintech)

    def test_adhoc_profile_compiled_on_demand(self, catalog, adhoc_profile):
        compiled = catalog.compiled(adhoc_profile)
        assert compiled.profile is adhoc_profile
        assert [term for term, _ in compiled.keywords] == ["contract", "litigation"]


class TestProfileSerialization:
    """Test IndustryProfile dict conversion."""

    def test_to_dict_uses_camel_case(self, profile):
        data = profile("healthcare").to_dict()
        assert data["focusAreas"] == ["Data Security", "Compliance", "Interoperability", "User Safety"]
        assert isinstance(data["keywords"], list)

    def test_from_dict_restores_profile(self, catalog):
        for p in catalog.all_profiles():
            assert IndustryProfile.from_dict(p.to_dict()) == p


class TestTermMatching:
    """Test literal, word-bounded, case-insensitive matching."""

    def test_case_insensitive(self):
        assert count_matches(compile_term("checkout"), "CHECKOUT and Checkout") == 2

    def test_word_boundaries(self):
        pattern = compile_term("patient")
        assert count_matches(pattern, "patients and outpatient care") == 0
        assert count_matches(pattern, "one patient.") == 1

    def test_special_characters_are_literal(self):
        cpp = compile_term("C++")
        assert count_matches(cpp, "Firmware in C++ and c++.") == 2
        assert count_matches(cpp, "Written in C") == 0

        pci = compile_term("PCI-DSS")
        assert count_matches(pci, "pci-dss level 1") == 1
        assert count_matches(pci, "PCI DSS") == 0

        vue = compile_term("Vue.js")
        assert count_matches(vue, "Vuexjs") == 0

    def test_matched_terms_keep_declaration_order(self):
        compiled = compile_terms(["alpha", "beta", "gamma"])
        assert matched_terms(compiled, "gamma beta alpha") == ["alpha", "beta", "gamma"]
        assert matched_terms(compiled, "gamma beta alpha", limit=2) == ["alpha", "beta"]

    def test_matched_terms_deduplicate(self):
        compiled = compile_terms(["Kafka", "kafka"])
        assert matched_terms(compiled, "KAFKA") == ["Kafka"]

    def test_word_count(self):
        assert word_count("") == 1
        assert word_count("   ") == 1
        assert word_count(" one  two\nthree\t") == 3
        assert word_count("  a b  ") == 2

    def test_round_half_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(2.5) == 3
        assert round_half_up(2.4999) == 2

    def test_clamp(self):
        assert clamp(0, 10, 95) == 10
        assert clamp(500, 10, 95) == 95
        assert clamp(42, 10, 95) == 42
