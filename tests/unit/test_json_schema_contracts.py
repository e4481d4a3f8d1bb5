"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema контракта big_number_state:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (min/max/enum/pattern)
- Интеграция с Pydantic моделью BigNumberState
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    BigNumberStateValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_number_state,
)
from src.core.domain import BigNumber

SCHEMA_DIR = Path(__file__).parent.parent.parent / "contracts" / "schema"


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_state():
    """Валидный big_number_state для тестирования."""
    return {
        "sign": 1,
        "length": 3,
        "groups": [789123456, 999123456, 9999999],
        "decimal": "9999999999123456789123456",
    }


@pytest.fixture
def zero_state():
    return {"sign": 0, "length": 0, "groups": [], "decimal": "0"}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_schema(self):
        schema = SchemaLoader().load_schema("big_number_state")
        assert schema["title"] == "BigNumberState"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("big_number_state") is loader.load_schema("big_number_state")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path):
        """Meta-валидация схемы"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_schema_file_is_valid_json(self):
        with open(SCHEMA_DIR / "big_number_state.json", encoding="utf-8") as f:
            assert json.load(f)["type"] == "object"


# =============================================================================
# BIG NUMBER STATE CONTRACT
# =============================================================================


class TestBigNumberStateContract:
    """Тесты контракта big_number_state"""

    def test_valid_state(self, valid_state):
        validate_big_number_state(valid_state)

    def test_zero_state(self, zero_state):
        validate_big_number_state(zero_state)

    def test_validator_class(self, valid_state):
        validator = BigNumberStateValidator()
        assert isinstance(validator, ContractValidator)
        assert validator.is_valid(valid_state)
        assert list(validator.iter_errors(valid_state)) == []

    @pytest.mark.parametrize("field", ["sign", "length", "groups", "decimal"])
    def test_missing_required_field(self, valid_state, field):
        del valid_state[field]
        with pytest.raises(ValidationError):
            validate_big_number_state(valid_state)

    def test_extra_field_rejected(self, valid_state):
        valid_state["debug"] = True
        with pytest.raises(ValidationError):
            validate_big_number_state(valid_state)

    def test_invalid_sign(self, valid_state):
        valid_state["sign"] = 2
        with pytest.raises(ValidationError):
            validate_big_number_state(valid_state)

    def test_group_out_of_range(self, valid_state):
        valid_state["groups"][0] = 1_000_000_000
        with pytest.raises(ValidationError):
            validate_big_number_state(valid_state)

    def test_group_wrong_type(self, valid_state):
        valid_state["groups"][0] = "789123456"
        with pytest.raises(ValidationError):
            validate_big_number_state(valid_state)

    @pytest.mark.parametrize("decimal", ["", "-0", "007", "12a", " 1"])
    def test_non_canonical_decimal(self, valid_state, decimal):
        valid_state["decimal"] = decimal
        with pytest.raises(ValidationError):
            validate_big_number_state(valid_state)

    def test_zero_sign_requires_empty_groups(self, zero_state):
        zero_state["groups"] = [1]
        zero_state["length"] = 1
        with pytest.raises(ValidationError):
            validate_big_number_state(zero_state)

    def test_negative_sign_requires_minus(self, valid_state):
        valid_state["sign"] = -1
        with pytest.raises(ValidationError):
            validate_big_number_state(valid_state)

    def test_all_errors_reported(self, valid_state):
        valid_state["sign"] = 5
        valid_state["length"] = -1
        errors = list(BigNumberStateValidator().iter_errors(valid_state))
        assert len(errors) >= 2


# =============================================================================
# ИНТЕГРАЦИЯ С PYDANTIC
# =============================================================================


class TestPydanticIntegration:
    """Снапшоты BigNumber соответствуют контракту"""

    @pytest.mark.parametrize(
        "value",
        [0, 1, -1, 999_999_999, 10**9, -(10**18), 10**100 + 7],
    )
    def test_state_dump_is_valid(self, value):
        data = BigNumber(value).state().model_dump(mode="json")
        validate_big_number_state(data)

    def test_state_dump_of_product(self):
        product = BigNumber("9999999999123456789123456") * BigNumber("-12345678912")
        validate_big_number_state(product.state().model_dump(mode="json"))
