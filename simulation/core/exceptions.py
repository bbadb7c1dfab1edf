"""Errors raised by the simulation engine."""


class ConfigurationError(ValueError):
    """Invalid simulation parameters, detected before any step is computed.

    Numeric anomalies (NaN, inf) that arise while stepping are not errors;
    they are carried through the trajectory unchanged.
    """
