"""Diary application service: saved meals and daily food entries."""

from application.diary.service import DailyLog, DiaryService, MealLogged

__all__ = ["DailyLog", "DiaryService", "MealLogged"]
