from models.course import Course, InvalidCourse
from models.remote_course import MalformedDuration, RemoteCourse, parse_duration_minutes

__all__ = [
    "Course",
    "InvalidCourse",
    "RemoteCourse",
    "MalformedDuration",
    "parse_duration_minutes",
]
