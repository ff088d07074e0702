from typing import Optional
import enum

class Skill(str, enum.Enum):
    knife_basics = "knife-basics"
    heat_control = "heat-control"
    seasoning = "seasoning"
    mise_en_place = "mise-en-place"
    pan_basics = "pan-basics"
    pasta_fundamentals = "pasta-fundamentals"
    egg_techniques = "egg-techniques"
    vegetable_prep = "vegetable-prep"
    sauce_basics = "sauce-basics"
    meat_handling = "meat-handling"

    @classmethod
    def from_tag(cls, tag) -> Optional["Skill"]:
        """Resolve a raw skill tag, None when it is not one of ours"""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return None
