"""Conversion of scalar constants to XML text."""

from typing import Union

from hal_xml_renderer.model.values import Scalar, ScalarType

TRUE_TEXT = "true"
FALSE_TEXT = "false"
NULL_TEXT = ""


def normalize(scalar: Union[Scalar, ScalarType]) -> str:
    """Convert true, false and null to their textual constants.

    Every other scalar is passed through as its plain ``str()`` form; no
    numeric or locale formatting is applied.

    Examples:
        >>> normalize(Scalar(True))
        'true'
        >>> normalize(None)
        ''
        >>> normalize(Scalar(42))
        '42'
    """
    value = scalar.value if isinstance(scalar, Scalar) else scalar

    if value is True:
        return TRUE_TEXT
    if value is False:
        return FALSE_TEXT
    if value is None:
        return NULL_TEXT
    return value if isinstance(value, str) else str(value)
