"""Tests for dataclasses integration."""

from dataclasses import dataclass, field

import pytest

from wirebox.container import Container
from wirebox.exceptions import UnresolvableParameterError


class DepService:
    pass


@dataclass
class DataclassModelWithDep:
    dep: DepService


@dataclass
class NestedDataclassModel:
    model: DataclassModelWithDep


@dataclass
class DataclassModelWithDefault:
    dep: DepService
    name: str = "default"
    tags: list[str] = field(default_factory=list)


@dataclass
class DataclassModelWithPrimitive:
    host: str
    port: int


@dataclass
class EmptyDataclassModel:
    pass


class TestDataclassResolution:
    def test_resolve_dataclass_with_dependency(self, container: Container) -> None:
        """Dataclass with a dependency field resolves correctly."""
        result = container.get(DataclassModelWithDep)

        assert isinstance(result, DataclassModelWithDep)
        assert isinstance(result.dep, DepService)

    def test_resolve_empty_dataclass(self, container: Container) -> None:
        """Dataclass with no fields resolves correctly."""
        result = container.get(EmptyDataclassModel)

        assert isinstance(result, EmptyDataclassModel)

    def test_resolve_dataclass_with_default(self, container: Container) -> None:
        """Defaults and default factories are left to the dataclass."""
        result = container.get(DataclassModelWithDefault)

        assert isinstance(result.dep, DepService)
        assert result.name == "default"
        assert result.tags == []

    def test_resolve_nested_dataclasses(self, container: Container) -> None:
        """Nested dataclass dependency chain resolves correctly."""
        result = container.get(NestedDataclassModel)

        assert isinstance(result.model, DataclassModelWithDep)
        assert isinstance(result.model.dep, DepService)

    def test_primitive_fields_take_overrides(self, container: Container) -> None:
        """Fields are filled positionally in declaration order."""
        result = container.get(DataclassModelWithPrimitive, ["localhost", 5432])

        assert result == DataclassModelWithPrimitive("localhost", 5432)

    def test_missing_primitive_field_is_unresolvable(self, container: Container) -> None:
        with pytest.raises(UnresolvableParameterError) as exc_info:
            container.get(DataclassModelWithPrimitive)

        assert exc_info.value.parameter == "host"
