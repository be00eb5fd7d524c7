"""Tests for board filename utilities."""

from kartao.utils.slug import generate_filename, slugify


class TestSlugify:
    """Tests for the slugify function."""

    def test_basic_text(self):
        """Simple text is lowercased and spaces become hyphens."""
        assert slugify("My Project") == "my-project"

    def test_whitespace_runs_collapsed(self):
        """Runs of spaces, tabs and newlines become a single hyphen."""
        assert slugify("hello   world") == "hello-world"
        assert slugify("hello\t\nworld") == "hello-world"

    def test_other_characters_kept(self):
        """Only case and whitespace are changed."""
        assert slugify("Q3 Plan!") == "q3-plan!"
        assert slugify("café_board") == "café_board"

    def test_leading_trailing_whitespace_becomes_hyphen(self):
        """Surrounding whitespace is not stripped."""
        assert slugify(" board ") == "-board-"

    def test_already_slug(self):
        """Already-valid slugs are unchanged."""
        assert slugify("my-project") == "my-project"


class TestGenerateFilename:
    """Tests for the generate_filename function."""

    def test_basic_name(self):
        """Basic name generates expected filename."""
        assert generate_filename("My Project") == "my-project.json"

    def test_adds_json_extension(self):
        """Filename always ends with .json."""
        assert generate_filename("Groceries").endswith(".json")
