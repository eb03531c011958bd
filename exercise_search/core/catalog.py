"""In-memory exercise catalog keyed by id."""

import json
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import structlog

from ..models.exercise import ExerciseRecord

logger = structlog.get_logger(__name__)


class ExerciseCatalog:
    """Ordered id -> exercise store. Insertion order is catalog order."""
    
    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self._exercises: Dict[str, ExerciseRecord] = {}
        self._stats = {
            "total_exercises": 0,
            "last_updated": None
        }
    
    def __len__(self) -> int:
        return len(self._exercises)
    
    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._exercises
    
    def load(self, exercises: Iterable[Union[ExerciseRecord, Dict[str, Any]]]) -> int:
        """
        Replace the catalog contents.
        
        Args:
            exercises: Records, or dicts validated into records
            
        Returns:
            Number of exercises loaded
            
        Raises:
            ValueError: If two exercises share an id
            pydantic.ValidationError: If a dict is not a valid exercise
        """
        loaded: Dict[str, ExerciseRecord] = {}
        for item in exercises:
            exercise = item if isinstance(item, ExerciseRecord) else ExerciseRecord.model_validate(item)
            if exercise.id in loaded:
                raise ValueError(f"Duplicate exercise id: {exercise.id}")
            loaded[exercise.id] = exercise
        
        self._exercises = loaded
        self._touch()
        logger.info("Exercise catalog loaded", total_exercises=len(loaded))
        return len(loaded)
    
    def load_json(self, path: Union[str, Path]) -> int:
        """
        Load the catalog from a JSON file holding a list of exercises.
        
        Args:
            path: Path to the JSON file
            
        Returns:
            Number of exercises loaded
        """
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
        return self.load(raw)
    
    def add(self, exercise: ExerciseRecord) -> None:
        """
        Append an exercise.
        
        Raises:
            ValueError: If the id is already present
        """
        if exercise.id in self._exercises:
            raise ValueError(f"Duplicate exercise id: {exercise.id}")
        self._exercises[exercise.id] = exercise
        self._touch()
    
    def remove(self, exercise_id: str) -> bool:
        """
        Remove an exercise.
        
        Returns:
            True if removed, False if not found
        """
        if exercise_id in self._exercises:
            del self._exercises[exercise_id]
            self._touch()
            return True
        return False
    
    def get(self, exercise_id: str) -> Optional[ExerciseRecord]:
        """Get an exercise by id."""
        return self._exercises.get(exercise_id)
    
    def all(self) -> List[ExerciseRecord]:
        """All exercises in catalog order."""
        return list(self._exercises.values())
    
    def find_by_exact_name(self, name: str) -> Optional[ExerciseRecord]:
        """First exercise whose name equals ``name``, ignoring case."""
        name_lower = name.lower()
        for exercise in self._exercises.values():
            if exercise.name.lower() == name_lower:
                return exercise
        return None
    
    def find_by_category(self, category: str) -> List[ExerciseRecord]:
        """Exercises in a category, ignoring case."""
        category_lower = category.lower()
        return [ex for ex in self._exercises.values() if ex.category.lower() == category_lower]
    
    def find_by_equipment(self, equipment: str) -> List[ExerciseRecord]:
        """Exercises using a piece of equipment, ignoring case."""
        equipment_lower = equipment.lower()
        return [ex for ex in self._exercises.values() if ex.equipment.lower() == equipment_lower]
    
    def clear(self) -> None:
        """Remove every exercise."""
        self._exercises.clear()
        self._stats = {
            "total_exercises": 0,
            "last_updated": None
        }
    
    def get_stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        return self._stats.copy()
    
    def _touch(self) -> None:
        self._stats["total_exercises"] = len(self._exercises)
        self._stats["last_updated"] = time.time()
