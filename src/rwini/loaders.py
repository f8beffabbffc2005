from adaptix.load_error import ValueLoadError

from rwini.values import Price, Speed, UnitClass


def price_from_string(value: str) -> Price:
    try:
        return Price.parse(value)
    except ValueError as exc:
        raise ValueLoadError(msg=str(exc), input_value=value) from None


def speed_from_string(value: str) -> Speed:
    try:
        return Speed.parse(value)
    except ValueError as exc:
        raise ValueLoadError(msg=str(exc), input_value=value) from None


def unit_class_from_string(value: str) -> UnitClass:
    try:
        return UnitClass.parse(value)
    except ValueError as exc:
        raise ValueLoadError(msg=str(exc), input_value=value) from None
