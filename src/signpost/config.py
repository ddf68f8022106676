"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(debug=True, log_unmatched=False)
    """

    # Log every path that no route matched (INFO on "signpost.router")
    log_unmatched: bool = True

    # Verify an alias context against the alias's declared type before
    # calling its apply function
    check_alias_context: bool = True

    # Include the known routes and aliases in unmatched-path log records
    debug: bool = False
