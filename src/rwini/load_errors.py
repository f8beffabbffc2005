from dataclasses import dataclass

from adaptix.load_error import (
    LoadExceptionGroup,
    MsgLoadError,
    NoRequiredFieldsLoadError,
    TypeLoadError,
    UnionLoadError,
)
from adaptix.struct_trail import get_trail

MISSING_FIELD_MESSAGE = "Missing required field"


@dataclass(frozen=True, slots=True)
class FieldError:
    key_path: list[str]
    message: str


def _is_none_variant(exc: BaseException) -> bool:
    return isinstance(exc, TypeLoadError) and exc.expected_type in (None, type(None))


def _describe_error(exc: BaseException) -> str:
    if isinstance(exc, MsgLoadError) and exc.msg is not None:
        return exc.msg

    if isinstance(exc, TypeLoadError):
        expected = exc.expected_type
        expected_name = "None" if expected in (None, type(None)) else getattr(expected, "__name__", str(expected))
        return f"Expected {expected_name}, got {type(exc.input_value).__name__}"

    return str(exc)


def _walk_exception(
    exc: BaseException,
    parent_path: list[str],
    result: list[FieldError],
) -> None:
    key_path = parent_path + [str(elem) for elem in get_trail(exc)]

    if isinstance(exc, LoadExceptionGroup):
        sub_errors = list(exc.exceptions)
        if isinstance(exc, UnionLoadError):
            # optional values: the None branch only says the value was not None
            sub_errors = [sub for sub in sub_errors if not _is_none_variant(sub)] or sub_errors
        for sub_exc in sub_errors:
            _walk_exception(sub_exc, key_path, result)
        return

    if isinstance(exc, NoRequiredFieldsLoadError):
        result.extend(
            FieldError(key_path=[*key_path, key], message=MISSING_FIELD_MESSAGE) for key in sorted(exc.fields)
        )
        return

    result.append(FieldError(key_path=key_path, message=_describe_error(exc)))


def extract_field_errors(exc: BaseException) -> list[FieldError]:
    """Flatten an adaptix load error into one entry per offending key."""
    result: list[FieldError] = []
    _walk_exception(exc, [], result)
    return result
