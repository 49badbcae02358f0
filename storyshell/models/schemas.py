"""
Pydantic schemas for values passed to and produced by agents
"""

from pydantic import BaseModel, Field, validator
from datetime import datetime


class UserInput(BaseModel):
    """Free-text request handed to an agent"""

    content: str
    timestamp: datetime = Field(default_factory=datetime.now)

    def __init__(self, content: str = None, **data):
        # Allow UserInput("...") as well as UserInput(content="...")
        if content is not None:
            data["content"] = content
        super().__init__(**data)

    @validator("content")
    def validate_content(cls, v):
        if not v.strip():
            raise ValueError("User input must not be empty")
        return v


class Story(BaseModel):
    """A story written by the generation step"""

    text: str


class ReviewedStory(BaseModel):
    """A story together with the review written about it"""

    story: Story
    review: str
    reviewer: str = Field(default="Story reviewer")

    @property
    def content(self) -> str:
        return (
            f"{self.story.text.strip()}\n\n"
            f"Review by {self.reviewer}:\n"
            f"{self.review.strip()}"
        )


class Animal(BaseModel):
    """An invented animal"""

    name: str
    species: str
    habitat: str
    description: str

    def __str__(self) -> str:
        return f"{self.name}, a {self.species} living in {self.habitat}: {self.description}"
