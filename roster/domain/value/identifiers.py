"""Strongly typed identifiers.

Ids are opaque strings minted by the services that own them: user ids by the
identity service, clinic ids by the clinic service, confirmation keys by us.
"""

from typing import NewType

UserId = NewType("UserId", str)
ClinicId = NewType("ClinicId", str)
ConfirmationKey = NewType("ConfirmationKey", str)
