"""
Navigation Component

Role-based navigation that adapts to the signed-in account
(student/teacher/admin). Anonymous visitors only see the login and
registration links.
"""

from typing import Dict, List, Optional, Tuple

from identity_access.domain import Identity, Role

from .base import Component

NavItem = Tuple[str, str, str]

COMMON_HEAD: List[NavItem] = [
    ("/", "Home", "🏠"),
    ("/profile", "Profile", "👤"),
]

ROLE_ITEMS: Dict[Role, List[NavItem]] = {
    Role.STUDENT: [
        ("/courses", "Courses", "📚"),
        ("/notifications", "Alerts", "🔔"),
    ],
    Role.TEACHER: [
        ("/classes", "Classes", "🏫"),
    ],
    Role.ADMIN: [
        ("/admin", "Admin", "🛡️"),
    ],
}

COMMON_TAIL: List[NavItem] = [
    ("/settings", "Settings", "⚙️"),
]

# Page titles keyed by path, shown in the header bar.
PAGE_TITLES: Dict[str, str] = {
    "/": "Dashboard",
    "/profile": "Profile",
    "/courses": "My Courses",
    "/notifications": "Notifications",
    "/classes": "Manage Classes",
    "/admin": "Admin Panel",
    "/settings": "Settings",
    "/login": "Login",
    "/register": "Create Account",
}


def nav_items_for(user: Optional[Identity]) -> List[NavItem]:
    """Return the ordered tab list for an account (empty for anonymous)."""
    if user is None:
        return []
    return COMMON_HEAD + ROLE_ITEMS.get(user.role, []) + COMMON_TAIL


class Navigation(Component):
    """Navigation component with role-based menu items"""

    def __init__(self, user: Optional[Identity] = None, current_path: str = "/"):
        self.user = user
        self.current_path = current_path

    def render(self) -> str:
        if self.user is None:
            return self._render_public_nav()

        active = self._determine_active_href(nav_items_for(self.user))
        links = [self._create_nav_link(href, text, icon, is_active=(href == active)) for href, text, icon in nav_items_for(self.user)]
        links.append(self._render_logout())
        return f"""
    <aside class="sidebar" id="sidebar" aria-label="Sidebar">
        <nav class="sidebar-nav" role="navigation" aria-label="Main navigation">
            <div class="sidebar-header">
                <span class="sidebar-title">EdTech Portal</span>
            </div>
            <div class="sidebar-items">
                {''.join(links)}
            </div>
            <div class="sidebar-footer">
                <div class="user-name">{self.escape(self.user.display_name)}</div>
                <div class="user-role">{self.escape(self.user.role.label)}</div>
            </div>
        </nav>
    </aside>"""

    def _render_public_nav(self) -> str:
        """Navigation for anonymous visitors"""
        return f"""
    <aside class="sidebar" id="sidebar" aria-label="Sidebar">
        <nav class="sidebar-nav" role="navigation" aria-label="Main navigation">
            <div class="sidebar-header">
                <span class="sidebar-title">EdTech Portal</span>
            </div>
            <div class="sidebar-items">
                {self._create_nav_link("/login", "Login", "🔑", is_active=self.current_path == "/login")}
                {self._create_nav_link("/register", "Register", "📝", is_active=self.current_path == "/register")}
            </div>
        </nav>
    </aside>"""

    def _determine_active_href(self, items: List[NavItem]) -> str:
        """Pick the single active href using best prefix match."""
        path = self.current_path or "/"
        best = "/"
        best_len = 0
        for href, _text, _icon in items:
            if href == path:
                return href
            if href != "/" and path.startswith(href) and len(href) > best_len:
                best = href
                best_len = len(href)
        return best

    def _create_nav_link(self, href: str, text: str, icon: str = "", *, is_active: bool = False) -> str:
        icon_html = f'<span class="nav-icon">{icon}</span>' if icon else ""
        active_class = " active" if is_active else ""
        aria_attr = ' aria-current="page"' if is_active else ""
        return f"""
        <a href="{href}" class="sidebar-link{active_class}" aria-label="{self.escape(text)}"{aria_attr}>
            {icon_html}
            <span class="nav-text">{self.escape(text)}</span>
        </a>"""

    def _render_logout(self) -> str:
        """Logout is a POST form; sign-out mutates the store."""
        return """
        <form method="post" action="/auth/logout" class="sidebar-logout">
            <button type="submit" class="sidebar-link" aria-label="Logout">
                <span class="nav-icon">🚪</span>
                <span class="nav-text">Logout</span>
            </button>
        </form>"""
