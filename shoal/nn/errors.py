from __future__ import annotations


class NetworkError(ValueError):
    """Base class for network construction failures."""


class InvalidTopologyError(NetworkError):
    pass


class NotEnoughWeightsError(NetworkError):
    pass


class TooManyWeightsError(NetworkError):
    pass
