"""Children age-band billing policy per cost category.

Hotel accommodation, tours and per-person transfers bill the same three
age bands differently:

================  ============  =============================  ==========
band              accommodation tour                           transfer
================  ============  =============================  ==========
under 3           free          free                           seat
3 to 6            free          children price (free if none)  seat
6 to 12           room child    adult price                    seat
================  ============  =============================  ==========

A transfer "seat" is billed at the per-person price like an adult.
"""

from src.models.enums import ChargeRule, ChildBand, CostCategory

CHILD_BAND_POLICY: dict[tuple[CostCategory, ChildBand], ChargeRule] = {
    (CostCategory.ACCOMMODATION, ChildBand.UNDER_3): ChargeRule.FREE,
    (CostCategory.ACCOMMODATION, ChildBand.FROM_3_TO_6): ChargeRule.FREE,
    (CostCategory.ACCOMMODATION, ChildBand.FROM_6_TO_12): ChargeRule.CHARGED_AT_BAND_RATE,
    (CostCategory.TOUR, ChildBand.UNDER_3): ChargeRule.FREE,
    (CostCategory.TOUR, ChildBand.FROM_3_TO_6): ChargeRule.CHARGED_AT_BAND_RATE,
    (CostCategory.TOUR, ChildBand.FROM_6_TO_12): ChargeRule.CHARGED_AS_ADULT,
    (CostCategory.TRANSFER, ChildBand.UNDER_3): ChargeRule.CHARGED_AS_ADULT,
    (CostCategory.TRANSFER, ChildBand.FROM_3_TO_6): ChargeRule.CHARGED_AS_ADULT,
    (CostCategory.TRANSFER, ChildBand.FROM_6_TO_12): ChargeRule.CHARGED_AS_ADULT,
}


def charge_rule(category: CostCategory, band: ChildBand) -> ChargeRule:
    """Get how a child band is billed within a cost category."""
    return CHILD_BAND_POLICY[(category, band)]


def chargeable_bands(category: CostCategory) -> list[ChildBand]:
    """Get the bands that may carry a charge within a cost category, youngest first."""
    return [
        band
        for band in ChildBand
        if CHILD_BAND_POLICY[(category, band)] != ChargeRule.FREE
    ]


def band_charge(
    category: CostCategory,
    band: ChildBand,
    count: int,
    adult_price: float,
    band_price: float | None,
) -> float:
    """Charge for ``count`` children of one band at the given prices.

    Args:
        category: Cost category the charge belongs to
        band: Children age band
        count: Number of children in the band
        adult_price: Adult price of the item being billed
        band_price: Category child price, None when the item defines none

    Returns:
        Charge for the band (0 when the band is free)
    """
    if count <= 0:
        return 0.0
    rule = charge_rule(category, band)
    if rule == ChargeRule.CHARGED_AS_ADULT:
        return adult_price * count
    if rule == ChargeRule.CHARGED_AT_BAND_RATE and band_price is not None:
        return band_price * count
    return 0.0
