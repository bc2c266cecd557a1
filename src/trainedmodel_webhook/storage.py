"""Storage URI protocols accepted for model artifacts."""

S3 = "s3://"
GCS = "gs://"
HTTPS = "https://"
HTTP = "http://"

SUPPORTED_PROTOCOLS = (S3, GCS, HTTPS, HTTP)


def get_all_protocols():
    """Return the supported storage protocol prefixes, in declaration order."""
    return list(SUPPORTED_PROTOCOLS)
