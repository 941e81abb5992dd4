"""DID Parsing utils."""

import re
from dataclasses import dataclass


DID_PRISM_PATTERN = re.compile(
    r"^did:prism:"
    r"(?:(?P<network>[a-z0-9]+(?::[a-z0-9]+)*?):)?"
    r"(?P<suffix>[0-9a-f]{64})"
    r"(?::(?P<encoded_state>[A-Za-z0-9_-]+))?$"
)


@dataclass
class DidPrism:
    """Parsed did:prism DID."""

    did: str
    suffix: str
    network: str | None = None
    encoded_state: str | None = None

    @property
    def is_long_form(self) -> bool:
        """Whether the DID carries its encoded initial state."""
        return self.encoded_state is not None

    @property
    def short_form(self) -> str:
        """Canonical short form of the DID."""
        if self.network:
            return f"did:prism:{self.network}:{self.suffix}"
        return f"did:prism:{self.suffix}"


def strip_url(did_url: str) -> str:
    """Extract did portion of a did url."""
    did, *_ = re.split(r"/|\?|#", did_url, maxsplit=1)
    return did


def parse_did_prism(did: str) -> DidPrism:
    """Extract info from a did:prism DID."""
    if not did.startswith("did:prism:"):
        raise ValueError(f"{did} is not a did:prism")

    match = DID_PRISM_PATTERN.match(did)
    if not match:
        raise ValueError(f"{did} is not a valid did:prism")

    return DidPrism(
        did=did,
        suffix=match.group("suffix"),
        network=match.group("network"),
        encoded_state=match.group("encoded_state"),
    )


def parse_did_prism_from_url(did_url: str) -> DidPrism:
    """Extract did:prism DID from url."""
    if not did_url.startswith("did:prism:"):
        raise ValueError(f"{did_url} is not a did:prism URL")

    return parse_did_prism(strip_url(did_url))
