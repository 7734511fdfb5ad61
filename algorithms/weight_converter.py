class WeightConverter:
    """Utility for converting between kg and lb."""

    KG_TO_LB = 2.20462

    @staticmethod
    def kg_to_lb(kg: float, precision: int | None = None) -> float:
        lb = kg * WeightConverter.KG_TO_LB
        return round(lb, precision) if precision is not None else lb

    @staticmethod
    def lb_to_kg(lb: float, precision: int | None = None) -> float:
        kg = lb / WeightConverter.KG_TO_LB
        return round(kg, precision) if precision is not None else kg


class LengthConverter:
    """Utility for converting between centimetres and inches."""

    CM_PER_INCH = 2.54

    @staticmethod
    def cm_to_in(cm: float, precision: int | None = None) -> float:
        inches = cm / LengthConverter.CM_PER_INCH
        return round(inches, precision) if precision is not None else inches

    @staticmethod
    def in_to_cm(inches: float, precision: int | None = None) -> float:
        cm = inches * LengthConverter.CM_PER_INCH
        return round(cm, precision) if precision is not None else cm
