"""Validation failures reported back to the admission pipeline."""

from . import crd


class TrainedModelValidationError(ValueError):
    """Base class for every reason a TrainedModel request is denied."""

    code = 403


class NameFormatError(TrainedModelValidationError):
    def __init__(self, name, regex):
        self.name = name
        self.regex = regex
        super().__init__(crd.INVALID_TM_NAME_FORMAT_ERROR.format(name=name, regex=regex))


class StorageURIFormatError(TrainedModelValidationError):
    def __init__(self, name, uri, prefixes):
        self.name = name
        self.uri = uri
        self.prefixes = tuple(prefixes)
        super().__init__(
            crd.INVALID_STORAGE_URI_FORMAT_ERROR.format(
                name=name,
                prefixes=crd.COMMA_SPACE_SEPARATOR.join(self.prefixes),
                uri=uri,
            )
        )


class ReferenceNotFoundError(TrainedModelValidationError):
    def __init__(self, isvc, name):
        self.isvc = isvc
        self.name = name
        super().__init__(crd.INVALID_ISVC_NAME_ERROR.format(isvc=isvc, name=name))


class ReferenceLookupError(TrainedModelValidationError):
    """The Service listing itself failed; the cause is chained as ``__cause__``."""

    code = 500

    def __init__(self, isvc, name, error):
        self.isvc = isvc
        self.name = name
        self.error = error
        super().__init__(crd.ISVC_LOOKUP_ERROR.format(isvc=isvc, name=name, error=error))


class ImmutableFieldViolationError(TrainedModelValidationError):
    def __init__(self, name, old, new):
        self.name = name
        self.old = old
        self.new = new
        super().__init__(crd.INVALID_TM_MEMORY_MODIFICATION.format(name=name, old=old, new=new))
