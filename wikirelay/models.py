from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ImageInfo(BaseModel):
    """A thumbnail descriptor. The API calls the image URL `source`."""

    model_config = ConfigDict(extra="allow")

    url: Optional[str] = None
    width: int
    height: int

    @model_validator(mode="before")
    @classmethod
    def source_as_url(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("url") is None and "source" in data:
            data = {**data, "url": data["source"]}
        return data

    def __str__(self) -> str:
        return str(self.model_dump(exclude_none=True))


class WikipediaPage(BaseModel):
    """
    A single page as returned by the API. Fields not declared here are kept
    as extra attributes, so the model never drops anything the API sent.
    """

    model_config = ConfigDict(extra="allow")

    pageid: Optional[int] = None
    ns: Optional[int] = None
    title: Optional[str] = None
    index: Optional[int] = None
    description: Optional[str] = None
    extract: Optional[str] = None
    terms: Optional[Dict[str, List[str]]] = None
    thumbnail: Optional[ImageInfo] = None
    langlinks: Optional[List[Dict[str, Any]]] = None
    fullurl: Optional[str] = None
    missing: Optional[bool] = None
    lang: Optional[str] = None

    @property
    def first_description_term(self) -> str:
        if self.terms and self.terms.get("description"):
            return self.terms["description"][0]
        return ""

    def __str__(self) -> str:
        return str(self.model_dump(exclude_none=True))
