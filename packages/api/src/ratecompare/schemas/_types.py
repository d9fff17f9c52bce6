# This project was developed with assistance from AI tools.
"""Numeric field types for API schemas.

Currency and percentage values stay ``Decimal`` inside the service layer and
serialize as plain JSON numbers.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

Numeric = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
