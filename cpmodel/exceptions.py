# cpmodel/exceptions.py


class ModelError(Exception):
    pass


class ResolutionError(ModelError):
    pass


class SpecSyntaxError(ResolutionError):
    pass


class ArityError(ResolutionError):
    pass


class UnderspecifiedError(ResolutionError):
    pass


class UnsupportedDistributionError(ResolutionError):
    pass


class BuildError(ModelError):
    pass


class ServiceNotRegistered(ModelError):
    pass
