# ui.py
import pygame

TEXT_RED = (230, 41, 55)
TEXT_WHITE = (255, 255, 255)
PANEL_FILL = (190, 33, 55, 64)
PANEL_BORDER = (130, 130, 130)
READY_BLINK_STEP = 0.1

HELP_LINES = (
    "Left/Right : move player",
    "R : restart game",
    "ESC : exit",
)


class Hud:
    """Scores, state banners and the help panel drawn over the stage."""

    def __init__(self, screen_width, screen_height):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self._fonts = {}

    def font(self, size):
        # pygame.font must be initialised before the first lookup
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont("Arial", size)
        return self._fonts[size]

    def _blit_centered(self, surf, text, size, y, color):
        txt = self.font(size).render(text, True, color)
        surf.blit(txt, (self.screen_width / 2 - txt.get_width() / 2, y))

    def draw_banner(self, surf, session):
        if session.ready:
            step = int(session.state_timer // READY_BLINK_STEP)
            if step % 2 == 0:
                self._blit_centered(surf, "READY?", 35, 70, TEXT_RED)
        elif session.game_over:
            self._blit_centered(surf, "GAME OVER", 35, 70, TEXT_RED)
            self._blit_centered(surf, "Press R to restart", 35, 100, TEXT_RED)

    def draw_scores(self, surf, session):
        font = self.font(25)
        surf.blit(font.render("1UP", True, TEXT_RED), (20, 10))
        surf.blit(font.render(f"{session.current_score}", True, TEXT_WHITE), (20, 35))

        header = font.render("HIGH SCORE", True, TEXT_RED)
        value = font.render(f"{session.high_score:10d}", True, TEXT_WHITE)
        header_x = self.screen_width / 2 - header.get_width() / 2
        # right-align the value under the header
        value_x = header_x + abs(header.get_width() - value.get_width())
        surf.blit(header, (header_x, 10))
        surf.blit(value, (value_x, 35))

    def draw_help(self, surf):
        base_x = self.screen_width - 300
        base_y = self.screen_height - 100
        panel = pygame.Surface((280, 80), pygame.SRCALPHA)
        panel.fill(PANEL_FILL)
        surf.blit(panel, (base_x, base_y))
        pygame.draw.rect(surf, PANEL_BORDER, (base_x, base_y, 280, 80), 1)
        font = self.font(20)
        for i, line in enumerate(HELP_LINES):
            surf.blit(font.render(line, True, TEXT_WHITE), (base_x + 10, base_y + 10 + i * 20))

    def draw(self, surf, session):
        self.draw_banner(surf, session)
        self.draw_scores(surf, session)
        self.draw_help(surf)
