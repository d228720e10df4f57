"""Finite sets of tokens accepted by the ProPublica Congress API."""

CHAMBERS = frozenset({"senate", "house"})

# members/{member_id}/bills/{type}
MEMBER_BILL_TYPES = frozenset({"introduced", "updated"})

# {congress}/{chamber}/votes/{type}
VOTE_TYPES = frozenset({"missed", "party", "loneno", "perfect"})

# {congress}/nominees/{type}
NOMINEE_TYPES = frozenset({"received", "updated", "confirmed", "withdrawn"})

# members/{first}/{type}/{second}/{congress}/{chamber}
MEMBER_COMPARISON_TYPES = frozenset({"bills", "votes"})

# {congress}/bills/{bill_id}/{type}
ADDITIONAL_BILL_DETAIL_TYPES = frozenset({"subjects", "amendments", "related", "cosponsors"})

# {congress}/{chamber}/bills/{type}
RECENT_BILL_TYPES = frozenset({"introduced", "updated", "passed", "major"})

# USPS codes for states, DC and the territories that send delegates.
STATES = frozenset(
    {
        "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
        "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
        "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
        "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
        "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
        "DC", "AS", "GU", "MP", "PR", "VI",
    }
)  # fmt: skip
