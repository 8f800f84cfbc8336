# Piece weight formulas: shop rules for stamped circles and packing plastic.
# All results in grams per piece, unrounded.

# Circle blank grams at the reference thickness: (263/254) * D^2
CIRCLE_GRAMS_PER_SQ_IN = 263 / 254
REFERENCE_THICKNESS_MM = 0.263

# Every thickness gets this tolerance added (0.26 -> 0.263, 0.33 -> 0.333)
THICKNESS_TOLERANCE_MM = 0.003

# Plastic film: in^2 * gauge / 3300 = grams
PLASTIC_GAUGE_DIVISOR = 3300.0


def effective_thickness_mm(thickness_mm: float) -> float:
    """Sheet thickness as used for weight, tolerance included."""
    return thickness_mm + THICKNESS_TOLERANCE_MM


def circle_weight_g(diameter_in: float, thickness_mm: float) -> float:
    """
    Weight of one circle blank before pressing.
    Base grams at 0.263mm, scaled linearly by effective thickness.
    """
    base = CIRCLE_GRAMS_PER_SQ_IN * diameter_in * diameter_in
    scale = effective_thickness_mm(thickness_mm) / REFERENCE_THICKNESS_MM
    return base * scale


def polybag_weight_g(size_in: float, gauge: float) -> float:
    """Square polybag: size * size * gauge / 3300."""
    return (size_in * size_in * gauge) / PLASTIC_GAUGE_DIVISOR


def pipe_weight_g(width_in: float, length_in: float, gauge: float) -> float:
    """One whole pipe (tube film): width * length * gauge / 3300."""
    return (width_in * length_in * gauge) / PLASTIC_GAUGE_DIVISOR


def pipe_share_g(width_in: float, length_in: float, gauge: float, pcs_per_pipe: float) -> float:
    """Per-piece share of a pipe that is cut into pcs_per_pipe pieces."""
    return pipe_weight_g(width_in, length_in, gauge) / pcs_per_pipe


def reduce_by_pct(weight_g: float, pct: float) -> float:
    """Weight left after losing pct percent."""
    return weight_g * (1 - pct / 100.0)
