"""Fee constants shared by every payment manager."""

# Share of (maker + taker) fees routed to creators when a manager sets none
DEFAULT_ROYALTY_FEE_SHARE = 5000

# Buy-side fee, basis points of the gross payment amount
DEFAULT_BUY_SIDE_FEE_SHARE = 50

# First seed of a token-metadata program derived address
METADATA_PREFIX = b"metadata"
