"""
Layout Component

Main layout wrapper that combines navigation, an optional flash message and
page content into a complete HTML document.
"""

from typing import Optional

from identity_access.domain import Identity

from .base import Component
from .navigation import Navigation

# Inline stylesheet keeps the demo self-contained (no static assets to serve).
_CSS = """
body { margin: 0; font-family: system-ui, sans-serif; display: flex; min-height: 100vh; background: #f4f6f8; }
.sidebar { width: 14rem; background: #1f3a5f; color: #fff; padding: 1rem; }
.sidebar-link { display: flex; gap: .5rem; color: #fff; text-decoration: none; padding: .4rem; background: none; border: 0; font: inherit; cursor: pointer; }
.sidebar-link.active { background: rgba(255,255,255,.15); border-radius: .3rem; }
.main-content { flex: 1; padding: 1.5rem; }
.card, .auth-card { background: #fff; border-radius: .5rem; padding: 1rem; margin-bottom: 1rem; list-style: none; }
.flash { background: #323232; color: #fff; padding: .75rem 1rem; border-radius: .3rem; margin-bottom: 1rem; }
.form-field { display: flex; flex-direction: column; margin-bottom: .75rem; }
.form-error { color: #b00020; }
.btn { padding: .5rem 1rem; border: 0; border-radius: .3rem; cursor: pointer; }
.btn-primary { background: #1f3a5f; color: #fff; }
.btn-danger { background: #b00020; color: #fff; }
.text-muted { color: #666; }
.inline-form { display: inline; }
"""


class Layout(Component):
    """Main layout component that assembles the complete page"""

    def __init__(
        self,
        title: str,
        content: str,
        user: Optional[Identity] = None,
        *,
        flash: Optional[str] = None,
        show_nav: bool = True,
        current_path: str = "/",
    ):
        """
        Args:
            title: Page title (will be escaped)
            content: Main content HTML (pre-rendered components)
            user: Signed-in account (None for anonymous pages)
            flash: Transient message shown above the content
            current_path: Current URL path for active navigation highlighting
        """
        self.title = title
        self.content = content
        self.user = user
        self.flash = flash
        self.show_nav = show_nav
        self.current_path = current_path

    def render(self) -> str:
        nav_html = Navigation(self.user, self.current_path).render() if self.show_nav else ""
        flash_html = (
            f'<div class="flash" role="status" aria-live="polite">{self.escape(self.flash)}</div>'
            if self.flash
            else ""
        )
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{self.escape(self.title)} - EdTech Portal</title>
    <style>{_CSS}</style>
</head>
<body>
    {nav_html}
    <main id="main-content" class="main-content" role="main">
        <header class="page-header"><h1 class="page-title">{self.escape(self.title)}</h1></header>
        {flash_html}
        {self.content}
    </main>
</body>
</html>"""
