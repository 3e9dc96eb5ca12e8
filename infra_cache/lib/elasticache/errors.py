class ConfigurationError(ValueError):
    """A replication group was described with options that contradict each other"""


class ReferenceIntegrityError(ValueError):
    """The attributes of an existing replication group are incomplete"""
