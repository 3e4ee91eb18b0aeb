"""Coloring book request models."""
from typing import Optional
from pydantic import BaseModel, Field


class ColoringBookSettings(BaseModel):
    theme: Optional[str] = Field(None, description="Theme for the coloring pages, e.g. 'forest animals'")
    child_name: Optional[str] = Field(None, description="Name printed on the cover page")
