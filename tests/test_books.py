"""Tests for book alias resolution."""

from verse_kit.books import BOOKS, canonical_name, match_book
from verse_kit.structure import load_structure_table


class TestMatchBook:
    def test_names_match_structure_table(self):
        """Alias table and bundled structure table list the same books in order."""
        assert [name for _, name, _ in BOOKS] == list(load_structure_table().books)

    def test_canonical_names_pass_through(self):
        """Canonical names resolve to themselves."""
        for _, name, _ in BOOKS:
            assert canonical_name(name) == name

    def test_osis_codes(self):
        """OSIS codes resolve regardless of case."""
        assert canonical_name("Matt") == "Matthew"
        assert canonical_name("1Cor") == "1 Corinthians"
        assert canonical_name("phlm") == "Philemon"

    def test_aliases(self):
        """Common abbreviations and alternate names resolve."""
        assert canonical_name("jn") == "John"
        assert canonical_name("Psalm") == "Psalms"
        assert canonical_name("Matt.") == "Matthew"
        assert canonical_name("song of songs") == "Song of Solomon"

    def test_numbered_books(self):
        """Numbered books accept digits, roman numerals and missing spaces."""
        assert canonical_name("1 cor") == "1 Corinthians"
        assert canonical_name("1co") == "1 Corinthians"
        assert canonical_name("1 co") == "1 Corinthians"
        assert canonical_name("1john") == "1 John"
        assert canonical_name("II Kings") == "2 Kings"
        assert canonical_name("iii john") == "3 John"

    def test_canon_order(self):
        """match_book reports the canonical position of the book."""
        assert match_book("Genesis")[0] == 1
        assert match_book("Revelation")[0] == 66

    def test_unknown(self):
        """Unrecognized text resolves to None."""
        assert canonical_name("Mathew") is None
        assert canonical_name("") is None
