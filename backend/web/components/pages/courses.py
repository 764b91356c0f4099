"""Student course overview (static catalogue)."""

from ..base import Component

ENROLLED = (
    ("Introduction to Programming", "Dr. Smith", "In Progress"),
    ("Calculus I", "Prof. Johnson", "Completed"),
)
AVAILABLE = (
    ("Advanced Data Structures", "Available now"),
    ("Machine Learning Fundamentals", "Starts next month"),
)


class CoursesPage(Component):
    def render(self) -> str:
        enrolled = "".join(
            f'<li class="card course"><strong>{self.escape(title)}</strong>'
            f'<span class="text-muted"> Teacher: {self.escape(teacher)}</span>'
            f'<span class="chip">{self.escape(status)}</span></li>'
            for title, teacher, status in ENROLLED
        )
        available = "".join(
            f'<li class="card course"><strong>{self.escape(title)}</strong>'
            f'<span class="text-muted"> {self.escape(when)}</span>'
            '<button type="button" class="btn btn-primary" disabled>Enroll</button></li>'
            for title, when in AVAILABLE
        )
        return f"""
        <section aria-labelledby="enrolled-title">
            <h2 id="enrolled-title">Enrolled Courses</h2>
            <ul class="course-list">{enrolled}</ul>
        </section>
        <section aria-labelledby="available-title">
            <h2 id="available-title">Available Courses</h2>
            <ul class="course-list">{available}</ul>
        </section>"""
