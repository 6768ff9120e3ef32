VALIDATOR_PARAM_DESCRIPTION = "The name, public key, address, or zil_address of the validator."
START_TIME_PARAM_DESCRIPTION = (
    "The start of the time range in ISO 8601 format. Defaults to 1 hour ago if not provided."
)
END_TIME_PARAM_DESCRIPTION = (
    "The end of the time range in ISO 8601 format. Defaults to the current time if not provided."
)
LIMIT_PARAM_DESCRIPTION = "How many validators to return (1-100). Defaults to 10."

WINDOW_NOTE = "If startTime and endTime are not provided, it defaults to the last hour."
WIDEN_NOTE = (
    "When no time range is given and fewer validators than requested reported data "
    "in the last hour, the window is widened to 24 hours to fill the list; "
    "last-hour values still take precedence."
)


GET_VALIDATOR_INFO_DESCRIPTION = """
Gets all available information for a validator (name, public key, address, zil_address)
by providing any one of those identifiers.
"""

LIST_VALIDATORS_DESCRIPTION = """
Lists every known validator with its name, public key, address and zil_address.
Use this to discover valid validator identifiers.
"""

GET_TOTAL_VALIDATOR_EARNINGS_DESCRIPTION = f"""
Gets the total earnings for a specific validator. {WINDOW_NOTE}
"""

GET_VALIDATOR_EARNINGS_BREAKDOWN_DESCRIPTION = f"""
Provides a detailed breakdown of a validator's earnings, separating rewards from block
proposals and cosignatures. {WINDOW_NOTE}
"""

GET_VALIDATOR_STAKE_DESCRIPTION = """
Retrieves the total amount of ZIL currently delegated to a validator, representing their
weight in the consensus mechanism.
"""

GET_PROPOSER_SUCCESS_RATE_DESCRIPTION = f"""
Measures a validator's performance specifically when tasked with proposing a new block.
A 100% proposer success rate is the gold standard. A missed proposal means a delay in the
chain and lost rewards for that validator. This metric is a critical indicator of a
validator's node stability and network latency. {WINDOW_NOTE}
"""

GET_COSIGNER_SUCCESS_RATE_DESCRIPTION = f"""
Measures a validator's performance when tasked with cosigning (attesting to) a block
proposed by another validator. Cosigning is the most frequent duty. A high success rate
demonstrates consistent uptime and connectivity. Even a small dip here can lead to a
noticeable reduction in rewards over time. {WINDOW_NOTE}
"""

GET_TOP_VALIDATORS_BY_STAKE_DESCRIPTION = """
Ranks validators by the amount of ZIL currently staked with them, highest first.
Validators missing from the latest 5-minute snapshot are looked up over the last 24 hours.
"""

GET_TOP_VALIDATORS_BY_EARNINGS_DESCRIPTION = f"""
Ranks validators by total ZIL rewards earned, highest first. {WINDOW_NOTE} {WIDEN_NOTE}
"""

GET_TOP_PROPOSER_SUCCESS_RATE_DESCRIPTION = f"""
Ranks validators by proposer success rate (successful proposals / proposals attempted),
highest first. Validators with no proposal attempts are left out. {WINDOW_NOTE} {WIDEN_NOTE}
"""

GET_TOP_COSIGNER_SUCCESS_RATE_DESCRIPTION = f"""
Ranks validators by cosigner success rate (cosigned views / views they were asked to cosign),
highest first. Validators with no cosigning duties are left out. {WINDOW_NOTE} {WIDEN_NOTE}
"""
