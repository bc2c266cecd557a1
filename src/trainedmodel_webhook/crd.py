"""CRD schema constants and validation messages."""

# CRD Group, Version, and Kind
GROUP = "serving.kserve.io"
VERSION = "v1alpha1"
PLURAL = "trainedmodels"
KIND = "TrainedModel"

# API version string
API_VERSION = f"{GROUP}/{VERSION}"

# Admission operations
OPERATION_CREATE = "CREATE"
OPERATION_UPDATE = "UPDATE"
OPERATION_DELETE = "DELETE"

# Name of the ValidatingWebhookConfiguration managed by the operator
WEBHOOK_NAME = "trainedmodel.kserve-webhook-server.validator"

# Suffix of the Service exposing an InferenceService predictor
PREDICTOR_SUFFIX = "-predictor"

COMMA_SPACE_SEPARATOR = ", "
TM_NAME_FMT = "[a-zA-Z0-9_-]+"

INVALID_TM_NAME_FORMAT_ERROR = (
    "the Trained Model \"{name}\" is invalid: a Trained Model name must consist of "
    "alphanumeric characters, '_', or '-'. (e.g. \"my-Name\" or \"abc_123\", "
    "regex used for validation is '{regex}')"
)
INVALID_STORAGE_URI_FORMAT_ERROR = (
    "the Trained Model \"{name}\" storageUri field is invalid. The storage uri must "
    "start with one of the prefixes: {prefixes}. (the storage uri given is \"{uri}\")"
)
INVALID_TM_MEMORY_MODIFICATION = (
    "the Trained Model \"{name}\" memory field is immutable. "
    "The memory was \"{old}\" but it is updated to \"{new}\""
)
INVALID_ISVC_NAME_ERROR = (
    "the inferenceservice \"{isvc}\" specified in the Trained Model \"{name}\" does not exist."
)
ISVC_LOOKUP_ERROR = (
    "could not verify inferenceservice \"{isvc}\" for the Trained Model \"{name}\": {error}"
)
