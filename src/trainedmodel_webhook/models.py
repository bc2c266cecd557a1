"""TrainedModel resource parsed from admission request bodies."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from kubernetes.utils import parse_quantity

Quantity = Union[str, int, float]


@dataclass(frozen=True)
class ModelSpec:
    storage_uri: str = ""
    framework: str = ""
    memory: Optional[Quantity] = None

    @property
    def memory_quantity(self) -> Decimal:
        """Exact value of ``memory``; raises ValueError if it is not a quantity.

        An omitted memory is the zero quantity.
        """
        if self.memory is None:
            return Decimal(0)
        return parse_quantity(self.memory)

    @property
    def memory_display(self) -> str:
        return "0" if self.memory is None else str(self.memory)

    @classmethod
    def from_dict(cls, model: Optional[Mapping[str, Any]]) -> "ModelSpec":
        model = model or {}
        return cls(
            storage_uri=model.get("storageUri") or "",
            framework=model.get("framework") or "",
            memory=model.get("memory"),
        )


@dataclass(frozen=True)
class TrainedModel:
    name: str
    namespace: str
    inference_service: str
    model: ModelSpec = field(default_factory=ModelSpec)

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> "TrainedModel":
        """Build a TrainedModel from a raw object such as kopf's ``body``."""
        metadata = body.get("metadata") or {}
        spec = body.get("spec") or {}
        return cls(
            name=metadata.get("name") or "",
            namespace=metadata.get("namespace") or "",
            inference_service=spec.get("inferenceService") or "",
            model=ModelSpec.from_dict(spec.get("model")),
        )
