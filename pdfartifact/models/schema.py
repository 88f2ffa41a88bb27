"""Declarative schema of the ``pdf`` resource."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pdfartifact.models.artifacts import PdfArtifactConfig


class AttributeSchema(BaseModel):
    """One named attribute of a resource."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    type: str = "string"
    required: bool = True
    force_new: bool = True  # a change forces delete-then-create


class ResourceSchema(BaseModel):
    """Resource type name, description and attribute list."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    description: str
    attributes: list[AttributeSchema]

    def get(self, name: str) -> AttributeSchema | None:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def requires_replace(
        self, prior: PdfArtifactConfig, proposed: PdfArtifactConfig
    ) -> list[str]:
        """Return the force-new attributes whose value differs.

        An empty list means the proposed config matches what was created.
        """
        before = prior.attributes()
        after = proposed.attributes()
        return [
            attribute.name
            for attribute in self.attributes
            if attribute.force_new and before.get(attribute.name) != after.get(attribute.name)
        ]


RESOURCE_SCHEMA = ResourceSchema(
    type_name="pdf",
    description="Render a PDF and write to a local file.",
    attributes=[
        AttributeSchema(name="header", description="Header/title of PDF"),
        AttributeSchema(name="content", description="Content of PDF"),
        AttributeSchema(
            name="filename",
            description="The path to the PDF file that will be created",
        ),
    ],
)
