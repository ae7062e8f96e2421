"""
Angle — Value object угла на фиксированном decimal-масштабе

Immutable Pydantic модель: величина угла + единица измерения.
Величина всегда приводится к фиксированному масштабу через to_fixed,
поэтому JSON-сериализация сохраняет точную десятичную запись.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from src.core.math.angles import normalize_angle, normalize_angle_deg, to_deg, to_rad
from src.core.math.fixed_decimal import DecimalLike, DecimalOverflowError, to_fixed
from src.core.math.inverse_trigonometry import acos, asin, atan, atan2
from src.core.math.trigonometry import cos, sin, tan


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """Единица измерения угла"""

    RADIANS = "rad"
    DEGREES = "deg"


# =============================================================================
# ANGLE MODEL
# =============================================================================


class Angle(BaseModel):
    """
    Угол с единицей измерения.

    Immutable модель (frozen=True): все преобразования создают новый экземпляр.
    Тригонометрические методы всегда работают с радианным представлением.
    """

    value: Decimal = Field(..., description="Величина угла (fixed-scale decimal)")
    unit: AngleUnit = Field(default=AngleUnit.RADIANS, description="Единица (rad/deg)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value", mode="before")
    @classmethod
    def coerce_fixed_scale(cls, v: DecimalLike) -> Decimal:
        """Приведение к фиксированному масштабу (NaN/Infinity отвергаются)"""
        try:
            return to_fixed(v)
        except (TypeError, DecimalOverflowError) as e:
            raise ValueError(str(e)) from e

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def radians(cls, value: DecimalLike) -> "Angle":
        return cls(value=value, unit=AngleUnit.RADIANS)

    @classmethod
    def degrees(cls, value: DecimalLike) -> "Angle":
        return cls(value=value, unit=AngleUnit.DEGREES)

    @classmethod
    def from_asin(cls, z: DecimalLike) -> "Angle":
        """Угол, синус которого равен z (DomainError вне [-1, 1])"""
        return cls.radians(asin(z))

    @classmethod
    def from_acos(cls, z: DecimalLike) -> "Angle":
        """Угол, косинус которого равен z (DomainError вне [-1, 1])"""
        return cls.radians(acos(z))

    @classmethod
    def from_atan(cls, x: DecimalLike) -> "Angle":
        return cls.radians(atan(x))

    @classmethod
    def from_atan2(cls, y: DecimalLike, x: DecimalLike) -> "Angle":
        """Угол точки (x, y), диапазон (-Pi, Pi]"""
        return cls.radians(atan2(y, x))

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def to_radians(self) -> "Angle":
        if self.unit == AngleUnit.RADIANS:
            return self
        return Angle.radians(to_rad(self.value))

    def to_degrees(self) -> "Angle":
        if self.unit == AngleUnit.DEGREES:
            return self
        return Angle.degrees(to_deg(self.value))

    def normalized(self) -> "Angle":
        """
        Угол, приведённый к одному обороту в своей единице.

        Returns:
            [0, TWO_PI) для радиан, [0, 360) для градусов
        """
        if self.unit == AngleUnit.DEGREES:
            return Angle.degrees(normalize_angle_deg(self.value))
        return Angle.radians(normalize_angle(self.value))

    # -------------------------------------------------------------------------
    # Тригонометрия
    # -------------------------------------------------------------------------

    def sin(self) -> Decimal:
        return sin(self.to_radians().value)

    def cos(self) -> Decimal:
        return cos(self.to_radians().value)

    def tan(self) -> Decimal:
        """Тангенс (UndefinedResultError при cos == 0)"""
        return tan(self.to_radians().value)
