class InvalidConfigError(Exception):
    """Raised when the scheduling configuration is invalid. Nothing is built from an invalid configuration."""

    pass


class UnknownTeacherError(InvalidConfigError):
    """Raised when a class references a teacher that is not declared."""

    pass


class InsufficientSlotsError(InvalidConfigError):
    """Raised when a class demands more weekly blocks than the timetable has slots."""

    pass


class InvalidConstraintSpecError(InvalidConfigError):
    """Raised when a soft constraint specification breaks hard_min <= soft_min <= soft_max <= hard_max or has a negative cost."""

    pass


class InputMismatchError(InvalidConfigError):
    """Raised when a fixed assignment or request references an unknown employee, shift or day."""

    pass


class ConfigFileError(InvalidConfigError):
    """Raised when a configuration file cannot be read or parsed."""

    pass


class NoFeasibleSolutionError(Exception):
    """Raised when the solver proves that no assignment satisfies the hard constraints."""

    pass


class NoSolutionError(Exception):
    """Raised when a report is requested for a solve that produced no assignment."""

    pass


class ModelInvalidError(Exception):
    """Raised when the solver rejects the built model as invalid."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    InvalidConfigError: 400,
    UnknownTeacherError: 400,
    InsufficientSlotsError: 400,
    InvalidConstraintSpecError: 400,
    InputMismatchError: 400,
    ConfigFileError: 400,
    NoFeasibleSolutionError: 422,
    NoSolutionError: 504,
    ModelInvalidError: 500,
}
