"""Admission webhook validating KServe TrainedModel resources."""

__version__ = "0.1.0"
