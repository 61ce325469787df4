from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Param(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Identifier of the constructor parameter")
    type: str = Field("any", min_length=1, description="Declared type text, 'any' when not annotated")
    import_path: Optional[str] = Field(None, description="Module specifier the type is imported from")


class ClassDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Class name, 'default' for an anonymous default export")
    constructor_params: List[Param] = Field(default_factory=list)
    public_methods: List[str] = Field(default_factory=list)
