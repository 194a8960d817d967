# visualization.py
"""
Handles the visualization of the particle simulation using Pygame.
"""
import logging
import pygame
from typing import Any, Dict, Optional, Tuple

from constants import (
    BACKGROUND_COLOR, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, FPS,
    UI_BACKGROUND_COLOR, UI_BUTTON_COLOR, UI_BUTTON_HOVER_COLOR, UI_PANEL_WIDTH,
    UI_TEXT_COLOR, UI_TEXT_KEY_COLOR, WINDOW_TITLE
)
from renderer import Color, render_frame

# Forward reference for type hinting to avoid circular import
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from simulation import Simulation


# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, vis_params: Optional[Dict[str, Any]] = None):
#     - Inputs:
#       - vis_params: "visualization" section of config.json.
#         - "fullscreen": bool
#         - "window_width": int
#         - "window_height": int
#     - Side Effects: Initializes Pygame and creates a display surface.
#       self.sim_width / self.sim_height give the simulation area, which
#       the simulation uses as its culling bounds.
#
#   - fill_rect / fill_circle / clear: the render surface primitives,
#     drawing onto the simulation area.
#
#   - draw(self, simulation: "Simulation") -> bool:
#     - Outputs:
#       - bool: False if the user has quit, True otherwise.
#     - Side Effects: Handles Pygame events (which may place fields or
#       change the current mass), renders the frame and the UI panel.
#
#   - wait_for_next_frame(self) -> int:
#     - Outputs: milliseconds since the previous call.
#     - Side Effects: Blocks until the next frame at FPS.

class Visualizer:
    """
    Renders the simulation state and translates user input into simulation actions.
    """
    def __init__(self, vis_params: Optional[Dict[str, Any]] = None):
        """
        Initializes Pygame and the display window.
        """
        vis_params = vis_params if vis_params is not None else {}
        pygame.init()
        pygame.font.init()

        if vis_params.get('fullscreen', False):
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        else:
            width = vis_params.get('window_width', DEFAULT_WINDOW_WIDTH) + UI_PANEL_WIDTH
            height = vis_params.get('window_height', DEFAULT_WINDOW_HEIGHT)
            self.screen = pygame.display.set_mode((width, height))

        # The simulation area is the total width minus the UI panel
        self.sim_width = width - UI_PANEL_WIDTH
        self.sim_height = height
        self.sim_surface = pygame.Surface((self.sim_width, self.sim_height))

        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        try:
            self.font_title = pygame.font.SysFont("Segoe UI", 16, bold=True)
            self.font_main = pygame.font.SysFont("Segoe UI", 14)
        except pygame.error:
            logging.warning("Segoe UI font not found, falling back to default sans-serif.")
            self.font_title = pygame.font.SysFont(None, 20, bold=True)
            self.font_main = pygame.font.SysFont(None, 18)

        # --- Button Layout ---
        panel_x = self.sim_width + 20
        button_width = (UI_PANEL_WIDTH - 50) // 2
        self.minus_button_rect = pygame.Rect(panel_x, 60, button_width, 30)
        self.plus_button_rect = pygame.Rect(panel_x + button_width + 10, 60, button_width, 30)
        self.reset_button_rect = pygame.Rect(panel_x, 100, UI_PANEL_WIDTH - 40, 30)

        # Start the frame clock here so setup time is not counted as a frame.
        self.clock.tick()

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    # --- Render surface ---

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        self.sim_surface.fill(color, pygame.Rect(int(x), int(y), w, h))

    def fill_circle(self, center_x: float, center_y: float, radius: float, color: Color) -> None:
        pygame.draw.circle(self.sim_surface, color, (int(center_x), int(center_y)), radius)

    def clear(self, width: int, height: int) -> None:
        self.sim_surface.fill(BACKGROUND_COLOR, pygame.Rect(0, 0, width, height))

    # --- Input ---

    def _handle_click(self, pos: Tuple[int, int], simulation: "Simulation") -> None:
        if self.plus_button_rect.collidepoint(pos):
            simulation.increase_mass()
        elif self.minus_button_rect.collidepoint(pos):
            simulation.decrease_mass()
        elif self.reset_button_rect.collidepoint(pos):
            simulation.reset_fields()
        elif pos[0] < self.sim_width:
            simulation.place_field(pos[0], pos[1])

    def _handle_events(self, simulation: "Simulation") -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    logging.info("ESC key pressed. Shutting down visualizer.")
                    return False
                if event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    simulation.increase_mass()
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    simulation.decrease_mass()
                elif event.key == pygame.K_r:
                    simulation.reset_fields()

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos, simulation)
        return True

    # --- UI panel ---

    def _draw_button(self, rect: pygame.Rect, label: str, mouse_pos: Tuple[int, int]):
        color = UI_BUTTON_HOVER_COLOR if rect.collidepoint(mouse_pos) else UI_BUTTON_COLOR
        pygame.draw.rect(self.screen, color, rect, border_radius=5)
        text_surf = self.font_main.render(label, True, UI_TEXT_COLOR)
        self.screen.blit(text_surf, text_surf.get_rect(center=rect.center))

    def _draw_panel(self, simulation: "Simulation", mouse_pos: Tuple[int, int]):
        panel_rect = pygame.Rect(self.sim_width, 0, UI_PANEL_WIDTH, self.sim_height)
        pygame.draw.rect(self.screen, UI_BACKGROUND_COLOR, panel_rect)

        panel_x = self.sim_width + 20
        mass_surf = self.font_title.render(f"Mass: {simulation.mass:.0f}", True, UI_TEXT_COLOR)
        self.screen.blit(mass_surf, (panel_x, 20))

        self._draw_button(self.minus_button_rect, "-", mouse_pos)
        self._draw_button(self.plus_button_rect, "+", mouse_pos)
        self._draw_button(self.reset_button_rect, "Reset", mouse_pos)

        stats = simulation.statistics()
        line_y = self.reset_button_rect.bottom + 20
        line_height = self.font_main.get_linesize()
        for key in ("particles", "fields", "emitters", "tick"):
            text = f"{key.title()}: {stats[key]}"
            self.screen.blit(self.font_main.render(text, True, UI_TEXT_KEY_COLOR), (panel_x, line_y))
            line_y += line_height
        speed_text = f"Mean Speed: {stats['mean_speed']:.2f}"
        self.screen.blit(self.font_main.render(speed_text, True, UI_TEXT_KEY_COLOR), (panel_x, line_y))
        line_y += line_height
        fps_text = f"FPS: {self.clock.get_fps():.0f}"
        self.screen.blit(self.font_main.render(fps_text, True, UI_TEXT_KEY_COLOR), (panel_x, line_y))

    def draw(self, simulation: "Simulation") -> bool:
        """
        Handles events, then draws the simulation area and UI panel.

        Returns:
            bool: False if the simulation should exit, True otherwise.
        """
        if not self._handle_events(simulation):
            return False

        render_frame(self, simulation)
        self.screen.blit(self.sim_surface, (0, 0))
        self._draw_panel(simulation, pygame.mouse.get_pos())

        pygame.display.flip()
        return True

    def wait_for_next_frame(self) -> int:
        """Sleeps until the next frame is due and returns the elapsed milliseconds."""
        return self.clock.tick(FPS)

    def close(self):
        """Shuts down Pygame."""
        pygame.font.quit()
        pygame.quit()
