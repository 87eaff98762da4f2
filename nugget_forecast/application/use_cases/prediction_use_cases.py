"""
Application Use Cases - Next Event Predictions

Entry points used by callers that hold raw activity history. Each use case:
  * Parses activities and preferences once at the boundary
  * Reads the current time from the injected clock
  * Runs the matching domain predictor
  * Returns a serializable ``PredictionResponseDTO``
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

import structlog
from pydantic import ValidationError

from nugget_forecast.application.dtos.activity_dto import ActivityRecordDTO, as_utc
from nugget_forecast.application.dtos.prediction_dto import PredictionResponseDTO
from nugget_forecast.application.dtos.preferences_dto import CustomPreferencesDTO
from nugget_forecast.domain.entities.activity import ActivityRecord
from nugget_forecast.domain.entities.errors import ActivityValidationError
from nugget_forecast.domain.entities.policy import PredictionPolicy
from nugget_forecast.domain.entities.prediction import (
    DiaperPrediction,
    FeedingPrediction,
    PredictionKind,
    PredictionResult,
    PumpingPrediction,
)
from nugget_forecast.domain.entities.preferences import CustomPreferences
from nugget_forecast.domain.services.age import BirthDate, baby_age_days
from nugget_forecast.domain.services.overdue import prediction_status
from nugget_forecast.domain.services.predictors import (
    predict_next_diaper,
    predict_next_feeding,
    predict_next_pumping,
    predict_next_sleep,
)

logger = structlog.get_logger(__name__)

ActivityInput = Union[ActivityRecord, ActivityRecordDTO, Mapping[str, Any]]
PreferencesInput = Union[CustomPreferences, CustomPreferencesDTO, Mapping[str, Any]]
BirthDateInput = Union[date, datetime, str]
Clock = Callable[[], datetime]


def _validation_messages(exc: ValidationError, prefix: str) -> List[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        target = f"{prefix}.{location}" if location else prefix
        messages.append(f"{target}: {error['msg']}")
    return messages


class _PredictionUseCase:
    """Shared parsing, logging and clock handling for the predictors."""

    kind: PredictionKind

    def __init__(self, policy: PredictionPolicy, clock: Clock):
        self.policy = policy
        self._clock = clock

    def execute(
        self,
        activities: Iterable[ActivityInput],
        baby_birth_date: Optional[BirthDateInput],
        custom_preferences: Optional[PreferencesInput] = None,
    ) -> PredictionResponseDTO:
        """
        Predict the next event for this use case's activity kind.

        Args:
            activities: Recent activity history, unsorted and of mixed types.
                Items may be domain records, DTOs or raw mappings.
            baby_birth_date: Birth date, or None when unknown.
            custom_preferences: Optional per-baby preferences.

        Raises:
            ActivityValidationError: When any input fails boundary validation.
                ``details["errors"]`` lists every problem found.
        """
        errors: List[str] = []
        records = self._parse_activities(activities, errors)
        birth_date = self._parse_birth_date(baby_birth_date, errors)
        preferences = self._parse_preferences(custom_preferences, errors)
        if errors:
            logger.warning(
                f"prediction.{self.kind.value}.invalid_input", errors=errors
            )
            raise ActivityValidationError(
                "Prediction input is invalid.", details={"errors": errors}
            )

        now = self._clock()
        logger.info(
            f"prediction.{self.kind.value}.start",
            activity_count=len(records),
            has_birth_date=birth_date is not None,
            has_custom_preferences=preferences is not None,
        )

        result = self._predict(records, birth_date, preferences, now)
        status = prediction_status(
            result.next_event_time,
            baby_age_days(birth_date, now),
            result.kind,
            now,
        )

        logger.info(
            f"prediction.{self.kind.value}.completed",
            confidence=result.confidence_level.value,
            next_event_time=result.next_event_time.isoformat(),
            interval_hours=round(result.interval_hours, 3),
            data_points=result.calculation_details.data_points,
            status=status.value,
        )
        return PredictionResponseDTO.from_domain(result, status)

    def _predict(
        self,
        records: List[ActivityRecord],
        birth_date: Optional[BirthDate],
        preferences: Optional[CustomPreferences],
        now: datetime,
    ) -> PredictionResult:
        raise NotImplementedError

    @staticmethod
    def _parse_activities(
        activities: Iterable[ActivityInput], errors: List[str]
    ) -> List[ActivityRecord]:
        if activities is None:
            errors.append("activities: a list of activities is required")
            return []

        records: List[ActivityRecord] = []
        for index, item in enumerate(activities):
            prefix = f"activities[{index}]"
            if isinstance(item, ActivityRecord):
                records.append(
                    replace(
                        item,
                        start_time=as_utc(item.start_time),
                        end_time=as_utc(item.end_time),
                    )
                )
            elif isinstance(item, ActivityRecordDTO):
                records.append(item.to_domain())
            elif isinstance(item, Mapping):
                try:
                    records.append(ActivityRecordDTO.model_validate(item).to_domain())
                except ValidationError as exc:
                    errors.extend(_validation_messages(exc, prefix))
            else:
                errors.append(
                    f"{prefix}: unsupported activity value of type "
                    f"{type(item).__name__}"
                )
        return records

    @staticmethod
    def _parse_birth_date(
        value: Optional[BirthDateInput], errors: List[str]
    ) -> Optional[BirthDate]:
        if value is None or isinstance(value, (date, datetime)):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.endswith("Z"):
                text = f"{text[:-1]}+00:00"
            try:
                return datetime.fromisoformat(text)
            except ValueError:
                errors.append(f"babyBirthDate: invalid date {value!r}")
                return None
        errors.append(
            f"babyBirthDate: unsupported value of type {type(value).__name__}"
        )
        return None

    @staticmethod
    def _parse_preferences(
        value: Optional[PreferencesInput], errors: List[str]
    ) -> Optional[CustomPreferences]:
        if value is None or isinstance(value, CustomPreferences):
            return value
        if isinstance(value, CustomPreferencesDTO):
            return value.to_domain()
        if isinstance(value, Mapping):
            try:
                return CustomPreferencesDTO.model_validate(value).to_domain()
            except ValidationError as exc:
                errors.extend(_validation_messages(exc, "customPreferences"))
                return None
        errors.append(
            f"customPreferences: unsupported value of type {type(value).__name__}"
        )
        return None


class PredictNextFeedingUseCase(_PredictionUseCase):
    """Predicts the next bottle or nursing feeding."""

    kind = PredictionKind.FEEDING

    def _predict(
        self,
        records: List[ActivityRecord],
        birth_date: Optional[BirthDate],
        preferences: Optional[CustomPreferences],
        now: datetime,
    ) -> FeedingPrediction:
        return predict_next_feeding(
            records, birth_date, preferences, now=now, policy=self.policy
        )


class PredictNextPumpingUseCase(_PredictionUseCase):
    """Predicts the next pumping session."""

    kind = PredictionKind.PUMPING

    def _predict(
        self,
        records: List[ActivityRecord],
        birth_date: Optional[BirthDate],
        preferences: Optional[CustomPreferences],
        now: datetime,
    ) -> PumpingPrediction:
        return predict_next_pumping(
            records, birth_date, preferences, now=now, policy=self.policy
        )


class PredictNextSleepUseCase(_PredictionUseCase):
    """Predicts the next sleep."""

    kind = PredictionKind.SLEEP

    def _predict(
        self,
        records: List[ActivityRecord],
        birth_date: Optional[BirthDate],
        preferences: Optional[CustomPreferences],
        now: datetime,
    ) -> PredictionResult:
        return predict_next_sleep(
            records, birth_date, preferences, now=now, policy=self.policy
        )


class PredictNextDiaperUseCase(_PredictionUseCase):
    """Predicts the next diaper change. Custom preferences are ignored."""

    kind = PredictionKind.DIAPER

    def _predict(
        self,
        records: List[ActivityRecord],
        birth_date: Optional[BirthDate],
        preferences: Optional[CustomPreferences],
        now: datetime,
    ) -> DiaperPrediction:
        return predict_next_diaper(records, birth_date, now=now, policy=self.policy)
