"""Unit tests for the NamedEntity domain model."""

import io

import pytest

from sample_types.domain.errors import InvalidIdentifierError, InvalidNameError
from sample_types.domain.exceptions import SampleTypesError
from sample_types.domain.models import NamedEntity


class TestNamedEntityConstruction:
    """Tests for constructing a NamedEntity."""

    def test_defaults_identifier_to_zero(self) -> None:
        entity = NamedEntity("Alice")

        assert entity.id == 0
        assert entity.name == "Alice"

    def test_identifier_is_settable(self) -> None:
        entity = NamedEntity("Alice")

        entity.id = 5

        assert entity.id == 5

    def test_negative_identifier_allowed(self) -> None:
        entity = NamedEntity("Alice")

        entity.id = -3

        assert entity.id == -3

    def test_name_is_read_only(self) -> None:
        entity = NamedEntity("Alice")

        with pytest.raises(AttributeError):
            entity.name = "Mallory"  # type: ignore[misc]

        assert entity.name == "Alice"

    @pytest.mark.parametrize("bad_name", [None, "", "   ", 42])
    def test_rejects_unusable_name(self, bad_name: object) -> None:
        with pytest.raises(InvalidNameError) as exc_info:
            NamedEntity(bad_name)  # type: ignore[arg-type]

        assert exc_info.value.name == bad_name

    @pytest.mark.parametrize("bad_id", ["5", 1.5, None, True])
    def test_rejects_non_integer_identifier(self, bad_id: object) -> None:
        entity = NamedEntity("Alice")

        with pytest.raises(InvalidIdentifierError):
            entity.id = bad_id  # type: ignore[assignment]

        assert entity.id == 0

    def test_errors_share_domain_base(self) -> None:
        assert issubclass(InvalidNameError, SampleTypesError)
        assert issubclass(InvalidIdentifierError, SampleTypesError)


class TestNamedEntityDisplay:
    """Tests for NamedEntity.display()."""

    def test_display_writes_exact_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        entity = NamedEntity("Bob")
        entity.id = 1

        entity.display()

        assert capsys.readouterr().out == "Id: 1, Name: Bob\n"

    def test_display_to_stream(self) -> None:
        entity = NamedEntity("Bob")
        stream = io.StringIO()

        entity.display(stream)

        assert stream.getvalue() == "Id: 0, Name: Bob\n"

    def test_display_returns_none(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert NamedEntity("Bob").display() is None

    def test_format_has_no_line_break(self) -> None:
        entity = NamedEntity("Bob")
        entity.id = 7

        assert entity.format() == "Id: 7, Name: Bob"
