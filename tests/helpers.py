import asyncio
import threading
from typing import List, Optional

from saute.catalog.lessons import Lesson, Step
from saute.catalog.skills import Skill

IMAGE = "data:image/jpeg;base64,/9j/4AAQSkZJRgABAQAAAQABAAD"


class FakeVisionClient:
    """Stands in for the vision model; replays a canned reply or raises."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []

    async def analyze_image(self, image: str, prompt: str) -> str:
        self.calls.append({"image": image, "prompt": prompt})
        if self.error is not None:
            raise self.error
        return self.reply


def make_lesson(*needs_validation: bool, skill: Skill = Skill.knife_basics) -> Lesson:
    steps = [
        Step(title=f"Step {index}", content=f"Content {index}", tip=f"Tip {index}", needs_validation=flag)
        for index, flag in enumerate(needs_validation)
    ]
    return Lesson(
        skill=skill,
        title="Test Lesson",
        description="A lesson used in tests",
        icon="*",
        difficulty="Beginner",
        coach_title="Test Coach",
        steps=steps,
    )


class GatedVisionClient(FakeVisionClient):
    """Holds every reply until ``release`` is set from the test thread."""

    def __init__(self, reply: str = "") -> None:
        super().__init__(reply=reply)
        self.release = threading.Event()

    async def analyze_image(self, image: str, prompt: str) -> str:
        while not self.release.is_set():
            await asyncio.sleep(0.01)
        return await super().analyze_image(image, prompt)
