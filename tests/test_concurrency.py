"""Tests for concurrent mutations of the shared document."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

from coursehub.application.catalog.use_cases.add_comment_use_case import AddCommentUseCase
from coursehub.application.certification.use_cases.update_progress_use_case import (
    UpdateProgressUseCase,
)
from coursehub.domain.certification.services.progress_workflow import ProgressWorkflow
from coursehub.domain.common.value_objects import CourseId, UserId
from coursehub.infrastructure.storage import JsonDocumentStore


def _update_progress_use_case(store: JsonDocumentStore, today: date) -> UpdateProgressUseCase:
    return UpdateProgressUseCase(
        document_store=store, workflow=ProgressWorkflow(), today=lambda: today
    )


class TestConcurrentProgressUpdates:
    """Test suite for parallel progress updates on one enrollment."""

    def test_no_update_is_lost(self, store: JsonDocumentStore, today: date) -> None:
        use_case = _update_progress_use_case(store, today)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: use_case.update_progress(5, 4), range(8)))

        user = store.load().find_user(UserId(5))
        assert user.progress_in(CourseId(4)).value == 80
        assert sorted(result.current.value for result in results) == list(range(10, 90, 10))

    def test_certificate_issued_exactly_once(self, store: JsonDocumentStore, today: date) -> None:
        use_case = _update_progress_use_case(store, today)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: use_case.update_progress(5, 4), range(12)))

        document = store.load()
        assert document.find_user(UserId(5)).progress_in(CourseId(4)).value == 100
        assert len(document.certificates_for_user(UserId(5))) == 1
        assert sum(result.certificate_issued for result in results) == 1


class TestConcurrentMixedMutations:
    def test_comments_and_progress_interleave(self, store: JsonDocumentStore, today: date) -> None:
        progress = _update_progress_use_case(store, today)
        comments = AddCommentUseCase(document_store=store)

        def run(index: int) -> None:
            if index % 2:
                progress.update_progress(2, 1)
            else:
                comments.add_comment(1, 2, f"Comentário {index}", 4)

        with ThreadPoolExecutor(max_workers=6) as pool:
            list(pool.map(run, range(6)))

        document = store.load()
        assert document.find_user(UserId(2)).progress_in(CourseId(1)).value == 80
        assert document.find_course(CourseId(1)).comment_count == 6
