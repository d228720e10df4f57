"""
Facade over the ProPublica Congress API: one coroutine per endpoint.

Each method lists its parameters as ``Param`` rules, validates them in that
order and only then asks the low-level client for the endpoint. The first
failing rule raises ``InvalidArgumentError`` and no request is made.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from propublica_congress import data
from propublica_congress.client import ProPublicaClient, create_client
from propublica_congress.config import Settings, settings
from propublica_congress.errors import InvalidArgumentError
from propublica_congress.validators import (
    is_valid_bill_id,
    is_valid_chamber,
    is_valid_committee_id,
    is_valid_congress,
    is_valid_current_congress,
    is_valid_district,
    is_valid_member_id,
    is_valid_month,
    is_valid_nomination_id,
    is_valid_roll_call_number,
    is_valid_session_number,
    is_valid_state,
    is_valid_subcommittee_id,
    is_valid_subject,
    is_valid_type,
    is_valid_year,
)

logger = logging.getLogger(__name__)

# Earliest congress each endpoint family covers.
MIN_CONGRESS_VOTES = {"senate": 101, "house": 102}
MIN_CONGRESS_MEMBER_LIST = {"senate": 80, "house": 102}
MIN_CONGRESS_NOMINATION_VOTES = 101
MIN_CONGRESS_BILLS = 105
MIN_CONGRESS_NOMINEES = 107
MIN_CONGRESS_COMMITTEES = 110
MIN_CONGRESS_LEAVING = 111
MIN_CONGRESS_STATEMENTS = 113
MIN_CONGRESS_HEARINGS = 114


def _by_chamber(minimums: dict[str, int], chamber: Any) -> int | None:
    return minimums.get(chamber) if isinstance(chamber, str) else None


@dataclass(frozen=True)
class Param:
    """A named argument, the predicate it must satisfy and the predicate's extra arguments."""

    name: str
    value: Any
    validator: Callable[..., bool]
    constraint: tuple = ()

    def is_valid(self) -> bool:
        return self.validator(self.value, *self.constraint)


def validate(*params: Param) -> None:
    """Raise InvalidArgumentError for the first param that fails its validator."""
    for param in params:
        if not param.is_valid():
            logger.debug(f"Rejected {param.name}={param.value!r}")
            raise InvalidArgumentError(param.name, param.value)


class Congress:
    """Async wrapper around the ProPublica Congress API endpoints."""

    def __init__(self, client: ProPublicaClient, congress: int, current: int):
        self.client = client
        self.congress = congress
        self.current = current

    def _congress(self, congress: int | None, earliest: int | None = None) -> Param:
        value = self.congress if congress is None else congress
        return Param("congress", value, is_valid_congress, (earliest, self.current))

    def _type(self, name: str, value: Any, type_set: frozenset[str]) -> Param:
        return Param(name, value, is_valid_type, (type_set,))

    async def get_member(self, member_id: str) -> Any:
        """Biographical and congressional role information for a member."""
        validate(Param("member_id", member_id, is_valid_member_id))
        return await self.client.get(f"members/{member_id}")

    async def get_committee_members(
        self, chamber: str, committee_id: str, *, congress: int | None = None, offset: int = 0
    ) -> Any:
        """
        Members of a particular committee.

        Args:
            chamber: 'senate' or 'house'.
            committee_id: Committee code, e.g. 'SSAF'.
            congress: Defaults to the facade's congress. 110 or later.
            offset: Page offset.
        """
        congress_param = self._congress(congress, MIN_CONGRESS_COMMITTEES)
        validate(
            Param("chamber", chamber, is_valid_chamber),
            Param("committee_id", committee_id, is_valid_committee_id),
            congress_param,
        )
        return await self.client.get(f"{int(congress_param.value)}/{chamber}/committees/{committee_id}", offset)

    async def get_nominees_by_state(self, state: str, *, congress: int | None = None) -> Any:
        """Presidential civilian nominations of individuals from a specific state."""
        congress_param = self._congress(congress, MIN_CONGRESS_NOMINEES)
        validate(Param("state", state, is_valid_state), congress_param)
        return await self.client.get(f"{int(congress_param.value)}/nominees/state/{state}")

    async def get_votes_by_date(self, chamber: str, year: int | str, month: int | str) -> Any:
        """All votes in a chamber during a particular month."""
        validate(
            Param("chamber", chamber, is_valid_chamber),
            Param("year", year, is_valid_year),
            Param("month", month, is_valid_month),
        )
        return await self.client.get(f"{chamber}/votes/{int(year)}/{int(month):02d}")

    async def get_roll_call_votes(
        self,
        chamber: str,
        session_number: int,
        roll_call_number: int,
        *,
        congress: int | None = None,
    ) -> Any:
        """
        A specific roll-call vote, including a complete list of member positions.

        Args:
            chamber: 'senate' or 'house'.
            session_number: 1 or 2, the session within the congress.
            roll_call_number: Roll-call number of the vote.
            congress: Defaults to the facade's congress. 101 or later for the
                senate, 102 or later for the house.
        """
        congress_param = self._congress(congress, _by_chamber(MIN_CONGRESS_VOTES, chamber))
        validate(
            Param("roll_call_number", roll_call_number, is_valid_roll_call_number),
            Param("session_number", session_number, is_valid_session_number),
            Param("chamber", chamber, is_valid_chamber),
            congress_param,
        )
        endpoint = (
            f"{int(congress_param.value)}/{chamber}/sessions/{int(session_number)}/votes/{int(roll_call_number)}"
        )
        return await self.client.get(endpoint)

    async def get_bills_by_member(self, member_id: str, member_bill_type: str, *, offset: int = 0) -> Any:
        """
        The 20 bills most recently introduced or updated by a member. Results
        can span more than one congress.
        """
        validate(
            Param("member_id", member_id, is_valid_member_id),
            self._type("member_bill_type", member_bill_type, data.MEMBER_BILL_TYPES),
        )
        return await self.client.get(f"members/{member_id}/bills/{member_bill_type}", offset)

    async def get_current_representatives(self, state: str, district: int | str) -> Any:
        validate(Param("state", state, is_valid_state), Param("district", district, is_valid_district))
        return await self.client.get(f"members/house/{state}/{int(district)}/current")

    async def get_current_senators(self, state: str) -> Any:
        validate(Param("state", state, is_valid_state))
        return await self.client.get(f"members/senate/{state}/current")

    async def get_leaving_members(self, chamber: str, *, congress: int | None = None, offset: int = 0) -> Any:
        """Members who have left the chamber or announced plans to do so."""
        congress_param = self._congress(congress, MIN_CONGRESS_LEAVING)
        validate(Param("chamber", chamber, is_valid_chamber), congress_param)
        return await self.client.get(f"{int(congress_param.value)}/{chamber}/members/leaving", offset)

    async def get_votes(
        self, chamber: str, vote_type: str, *, congress: int | None = None, offset: int = 0
    ) -> Any:
        """
        Vote statistics for a chamber and congress in one of four categories.

        - missed: voting attendance of each member.
        - party: how often each member votes with a majority of their party.
        - loneno: members who were the only No vote on a roll call, and how often.
        - perfect: members who voted Yes or No on every vote they were eligible for.
        """
        congress_param = self._congress(congress, _by_chamber(MIN_CONGRESS_VOTES, chamber))
        validate(
            Param("chamber", chamber, is_valid_chamber),
            self._type("vote_type", vote_type, data.VOTE_TYPES),
            congress_param,
        )
        return await self.client.get(f"{int(congress_param.value)}/{chamber}/votes/{vote_type}", offset)

    async def get_senate_nomination_votes(self, *, congress: int | None = None, offset: int = 0) -> Any:
        congress_param = self._congress(congress, MIN_CONGRESS_NOMINATION_VOTES)
        validate(congress_param)
        return await self.client.get(f"{int(congress_param.value)}/nominations", offset)

    async def get_nominees(self, nominee_type: str, *, congress: int | None = None) -> Any:
        """Presidential nominations for civilian positions by status."""
        congress_param = self._congress(congress, MIN_CONGRESS_NOMINEES)
        validate(congress_param, self._type("nominee_type", nominee_type, data.NOMINEE_TYPES))
        return await self.client.get(f"{int(congress_param.value)}/nominees/{nominee_type}")

    async def get_nomination(self, nomination_id: str, *, congress: int | None = None) -> Any:
        """A specific nomination, e.g. 'PN25'."""
        congress_param = self._congress(congress, MIN_CONGRESS_NOMINEES)
        validate(Param("nomination_id", nomination_id, is_valid_nomination_id), congress_param)
        return await self.client.get(f"{int(congress_param.value)}/nominees/{nomination_id}")

    async def get_party_counts(self) -> Any:
        """Party membership counts for all states (current congress only)."""
        return await self.client.get("states/members/party")

    async def get_committees(self, chamber: str, *, congress: int | None = None, offset: int = 0) -> Any:
        congress_param = self._congress(congress, MIN_CONGRESS_COMMITTEES)
        validate(Param("chamber", chamber, is_valid_chamber), congress_param)
        return await self.client.get(f"{int(congress_param.value)}/{chamber}/committees", offset)

    async def get_subcommittee(
        self, chamber: str, committee_id: str, subcommittee_id: str, *, congress: int | None = None
    ) -> Any:
        congress_param = self._congress(congress, MIN_CONGRESS_HEARINGS)
        validate(
            Param("chamber", chamber, is_valid_chamber),
            Param("committee_id", committee_id, is_valid_committee_id),
            Param("subcommittee_id", subcommittee_id, is_valid_subcommittee_id),
            congress_param,
        )
        endpoint = f"{int(congress_param.value)}/{chamber}/committees/{committee_id}/subcommittees/{subcommittee_id}"
        return await self.client.get(endpoint)

    async def get_committee_hearings(
        self, chamber: str, committee_id: str, *, congress: int | None = None, offset: int = 0
    ) -> Any:
        congress_param = self._congress(congress, MIN_CONGRESS_HEARINGS)
        validate(
            Param("chamber", chamber, is_valid_chamber),
            Param("committee_id", committee_id, is_valid_committee_id),
            congress_param,
        )
        endpoint = f"{int(congress_param.value)}/{chamber}/committees/{committee_id}/hearings"
        return await self.client.get(endpoint, offset)

    async def get_member_comparison(
        self,
        first_member_id: str,
        second_member_id: str,
        chamber: str,
        member_comparison_type: str,
        *,
        congress: int | None = None,
        offset: int = 0,
    ) -> Any:
        """
        Compare bill sponsorship or vote positions of two members who served
        in the same congress and chamber.

        Args:
            first_member_id: Bioguide ID of the first member.
            second_member_id: Bioguide ID of the second member.
            chamber: 'senate' or 'house'.
            member_comparison_type: 'bills' or 'votes'.
            congress: Defaults to the facade's congress.
            offset: Page offset.
        """
        congress_param = self._congress(congress, _by_chamber(MIN_CONGRESS_VOTES, chamber))
        validate(
            Param("chamber", chamber, is_valid_chamber),
            Param("first_member_id", first_member_id, is_valid_member_id),
            Param("second_member_id", second_member_id, is_valid_member_id),
            self._type("member_comparison_type", member_comparison_type, data.MEMBER_COMPARISON_TYPES),
            congress_param,
        )
        endpoint = (
            f"members/{first_member_id}/{member_comparison_type}/{second_member_id}"
            f"/{int(congress_param.value)}/{chamber}"
        )
        return await self.client.get(endpoint, offset)

    async def get_votes_by_member(self, member_id: str, *, offset: int = 0) -> Any:
        """Most recent vote positions for a member."""
        validate(Param("member_id", member_id, is_valid_member_id))
        return await self.client.get(f"members/{member_id}/votes", offset)

    async def get_new_members(self, *, offset: int = 0) -> Any:
        return await self.client.get("members/new", offset)

    async def get_member_list(self, chamber: str, *, congress: int | None = None, offset: int = 0) -> Any:
        """Members of a chamber in a congress. 80 or later for the senate, 102 or later for the house."""
        congress_param = self._congress(congress, _by_chamber(MIN_CONGRESS_MEMBER_LIST, chamber))
        validate(Param("chamber", chamber, is_valid_chamber), congress_param)
        return await self.client.get(f"{int(congress_param.value)}/{chamber}/members", offset)

    async def get_additional_bill_details(
        self,
        bill_id: str,
        additional_bill_detail_type: str,
        *,
        congress: int | None = None,
        offset: int = 0,
    ) -> Any:
        """Subjects, amendments, related bills or cosponsors of a bill."""
        congress_param = self._congress(congress, MIN_CONGRESS_BILLS)
        validate(
            Param("bill_id", bill_id, is_valid_bill_id),
            congress_param,
            self._type(
                "additional_bill_detail_type", additional_bill_detail_type, data.ADDITIONAL_BILL_DETAIL_TYPES
            ),
        )
        endpoint = f"{int(congress_param.value)}/bills/{bill_id}/{additional_bill_detail_type}"
        return await self.client.get(endpoint, offset)

    async def get_bill(self, bill_id: str, *, congress: int | None = None) -> Any:
        """A bill, including actions taken and votes."""
        congress_param = self._congress(congress, MIN_CONGRESS_BILLS)
        validate(Param("bill_id", bill_id, is_valid_bill_id), congress_param)
        return await self.client.get(f"{int(congress_param.value)}/bills/{bill_id}")

    async def get_recent_bills(
        self, chamber: str, recent_bill_type: str, *, congress: int | None = None, offset: int = 0
    ) -> Any:
        """
        Summaries of the 20 most recent bills by type. For past congresses
        this is the last 20 bills of that congress.
        """
        congress_param = self._congress(congress, MIN_CONGRESS_BILLS)
        validate(
            Param("chamber", chamber, is_valid_chamber),
            congress_param,
            self._type("recent_bill_type", recent_bill_type, data.RECENT_BILL_TYPES),
        )
        return await self.client.get(f"{int(congress_param.value)}/{chamber}/bills/{recent_bill_type}", offset)

    async def get_upcoming_bills(self, chamber: str) -> Any:
        """Bills scheduled or under consideration for the coming week."""
        validate(Param("chamber", chamber, is_valid_chamber))
        return await self.client.get(f"bills/upcoming/{chamber}")

    async def get_bills_by_subject(self, subject: str, *, offset: int = 0) -> Any:
        validate(Param("subject", subject, is_valid_subject))
        return await self.client.get(f"bills/subjects/{subject}", offset)

    async def get_recent_statements(self, *, offset: int = 0) -> Any:
        return await self.client.get("statements/latest", offset)

    async def get_member_statements(
        self, member_id: str, *, congress: int | None = None, offset: int = 0
    ) -> Any:
        congress_param = self._congress(congress, MIN_CONGRESS_STATEMENTS)
        validate(Param("member_id", member_id, is_valid_member_id), congress_param)
        return await self.client.get(f"members/{member_id}/statements/{int(congress_param.value)}", offset)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Congress":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def create(
    key: str | None = None,
    congress: int | None = None,
    *,
    current: int | None = None,
    config: Settings | None = None,
    **client_options: Any,
) -> Congress:
    """
    Factory for the Congress API facade.

    Args:
        key: ProPublica API key. Falls back to PROPUBLICA_API_KEY.
        congress: Default congress for methods that take one. Falls back to
            the current congress.
        current: Most recent congress accepted anywhere. Falls back to
            PROPUBLICA_CURRENT_CONGRESS.
        config: Settings to read defaults from instead of the module settings.
        **client_options: Overrides passed to create_client (host, version,
            strict_results, timeout, max_attempts, http_client).

    Raises:
        InvalidArgumentError: For an invalid congress, current congress or API key.
    """
    config = config or settings
    key = config.api_key if key is None else key
    current = config.current_congress if current is None else current
    if not is_valid_current_congress(current):
        raise InvalidArgumentError("current_congress", current)
    current = int(current)
    congress = current if congress is None else congress

    if not is_valid_congress(congress, current=current):
        raise InvalidArgumentError("congress", congress)

    options = {
        "host": config.host,
        "version": config.api_version,
        "strict_results": config.strict_results,
        "timeout": config.timeout_seconds,
        "max_attempts": config.max_attempts,
    }
    options.update(client_options)
    client = create_client(key, **options)
    logger.debug(f"Created Congress facade for congress {congress} (current {current})")
    return Congress(client, congress=int(congress), current=current)
