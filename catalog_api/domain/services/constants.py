# Outcomes of the conditional charge step of the assignment workflow
CHARGE_APPLIED = "applied"   # directory confirmed the debit
CHARGE_FAILED = "failed"     # assignment recorded, debit not confirmed
CHARGE_SKIPPED = "skipped"   # charging disabled, or product has no numeric price

# Id prefixes for sequential ids (p1, p2, ... / as1, as2, ...)
PRODUCT_ID_PREFIX = "p"
ASSIGNMENT_ID_PREFIX = "as"

DEFAULT_CATEGORY = "general"
