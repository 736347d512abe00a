"""A deployment manifest with containers referring to images by name."""

from dataclasses import dataclass, field
from typing import List, Optional

from deepvalidate import ValidationError, append, append_field_error, require_field


@dataclass
class Container:
    name: str = field(default="", metadata={"json": "name"})
    image_ref: str = field(default="", metadata={"json": "imageRef"})

    def validate(self) -> Optional[BaseException]:
        errs = None
        errs = append(errs, require_field("name", self.name))
        errs = append(errs, require_field("image_ref", self.image_ref))

        return errs


@dataclass
class Image:
    name: str = field(default="", metadata={"json": "name"})
    uri: str = field(default="", metadata={"json": "uri"})
    tag: str = field(default="", metadata={"json": "tag"})

    def validate(self) -> Optional[BaseException]:
        errs = None
        errs = append(errs, require_field("name", self.name))
        errs = append(errs, require_field("uri", self.uri))
        errs = append(errs, require_field("tag", self.tag))

        return errs


@dataclass
class Spec:
    containers: List[Container] = field(
        default_factory=list, metadata={"json": "containers"}
    )
    images: List[Image] = field(default_factory=list, metadata={"json": "images"})

    def validate(self) -> Optional[BaseException]:
        errs = None

        if not self.containers:
            errs = append_field_error(
                errs, "containers", "must contain at least one item"
            )
        else:
            images = {img.name for img in self.images if img.name}
            for i, container in enumerate(self.containers):
                if container.image_ref and container.image_ref not in images:
                    errs = append(
                        errs,
                        ValidationError(
                            path=f"containers.{i}.imageRef",
                            message=f"image with name '{container.image_ref}' not found",
                        ),
                    )

        if not self.images:
            errs = append_field_error(errs, "images", "must contain at least one item")

        return errs


@dataclass
class Manifest:
    spec: Optional[Spec] = field(default=None, metadata={"json": "spec"})

    def validate(self) -> Optional[BaseException]:
        return require_field("spec", self.spec)


def build() -> Manifest:
    return Manifest(
        spec=Spec(
            containers=[
                Container(image_ref="server"),
                Container(name="worker", image_ref="myServer"),
            ],
            images=[Image(name="server")],
        )
    )
