from datetime import date

from dependency_injector import containers, providers

from coursehub.application.catalog.use_cases.add_comment_use_case import AddCommentUseCase
from coursehub.application.catalog.use_cases.create_course_use_case import CreateCourseUseCase
from coursehub.application.catalog.use_cases.delete_commentless_courses_use_case import (
    DeleteCommentlessCoursesUseCase,
)
from coursehub.application.certification.use_cases.issue_certificate_use_case import (
    IssueCertificateUseCase,
)
from coursehub.application.certification.use_cases.update_progress_use_case import (
    UpdateProgressUseCase,
)
from coursehub.application.reporting.use_cases.course_query_use_case import CourseQueryUseCase
from coursehub.application.reporting.use_cases.user_query_use_case import UserQueryUseCase
from coursehub.config import get_settings
from coursehub.domain.certification.services.progress_workflow import ProgressWorkflow
from coursehub.domain.reporting.services import CourseStatisticsService, UserViewService
from coursehub.infrastructure.storage import JsonDocumentStore


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # One store per process: its lock serializes every mutation
    document_store = providers.Singleton(JsonDocumentStore, path=settings.provided.DATA_FILE)

    # Clock used to date certificates
    today = providers.Object(date.today)

    # Domain services (pure domain logic, no storage)
    progress_workflow = providers.Factory(ProgressWorkflow)
    course_statistics_service = providers.Factory(CourseStatisticsService)
    user_view_service = providers.Factory(UserViewService, workflow=progress_workflow)

    # Certification module, application use cases
    update_progress_use_case = providers.Factory(
        UpdateProgressUseCase,
        document_store=document_store,
        workflow=progress_workflow,
        today=today,
    )
    issue_certificate_use_case = providers.Factory(
        IssueCertificateUseCase,
        document_store=document_store,
        workflow=progress_workflow,
        today=today,
    )

    # Catalog module, application use cases
    create_course_use_case = providers.Factory(
        CreateCourseUseCase,
        document_store=document_store,
    )
    add_comment_use_case = providers.Factory(
        AddCommentUseCase,
        document_store=document_store,
    )
    delete_commentless_courses_use_case = providers.Factory(
        DeleteCommentlessCoursesUseCase,
        document_store=document_store,
    )

    # Reporting module, application use cases
    course_query_use_case = providers.Factory(
        CourseQueryUseCase,
        document_store=document_store,
        statistics=course_statistics_service,
    )
    user_query_use_case = providers.Factory(
        UserQueryUseCase,
        document_store=document_store,
        views=user_view_service,
    )


# Initialize container
container = Container()
