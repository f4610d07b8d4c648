"""dogbreeds: sub-breed lookups against dog.ceo with a memoizing provider layer."""

__version__ = "0.1.0"
