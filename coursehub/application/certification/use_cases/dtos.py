"""DTOs for certification use cases."""

from dataclasses import dataclass

from coursehub.domain.certification.entities.certificate import Certificate


@dataclass
class IssuedCertificate:
    """DTO for a freshly issued certificate with display context."""

    certificate: Certificate
    user_name: str
    course_title: str
    progress: int
