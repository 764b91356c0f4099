"""Static application settings page."""

from ..base import Component

APP_VERSION = "1.0.0"
LANGUAGES = ("English", "Spanish", "French")


class SettingsPage(Component):
    def render(self) -> str:
        options = "".join(f"<option>{self.escape(lang)}</option>" for lang in LANGUAGES)
        return f"""
        <section class="card settings" aria-labelledby="prefs-title">
            <h2 id="prefs-title">Preferences</h2>
            <label><input type="checkbox" name="notifications" checked> Notifications</label>
            <label>Language <select name="language">{options}</select></label>
            <p><a href="/profile">Security</a></p>
        </section>
        <section class="card about" aria-labelledby="about-title">
            <h2 id="about-title">About</h2>
            <p>Version <span class="app-version">{APP_VERSION}</span></p>
            <p><a href="#terms">Terms of Service</a> – <a href="#privacy">Privacy Policy</a></p>
        </section>"""
