import logging

import pygame
from constants import (BLACK, CHARGES_COUNT, CHARGES_VALUE, DEFAULT_CAPACITANCE, DEFAULT_INDUCTANCE,
                       DEFAULT_PEAK_VOLTAGE, DELTA_TIME, FPS, GREY, HEIGHT, LOOP_ORIGIN, LOOP_SIZE,
                       PANEL_ORIGINS, PANEL_SIZE, PERIODS, SAMPLE_DENSITY, WHITE, WIDTH, YELLOW)
from oscillator.logging_config import setup_logging
from oscillator.render import draw_circuit, draw_panel
from oscillator.runner import RunController

from multiprocessing import Process, Manager
import gui_controller as gui_ctrl

logger = logging.getLogger("oscillator.main")

def draw(screen, controller, font):
    screen.fill(GREY)

    circuit = controller.circuit
    if circuit is None:
        return

    draw_circuit(screen, circuit, wire_color=WHITE, marker_color=YELLOW)

    for panel in controller.panels:
        pygame.draw.rect(screen, WHITE, pygame.Rect(int(panel.pos.x) - 12, int(panel.pos.y) - 12,
                                                    int(panel.size.x) + 30, int(panel.size.y) + 24))
        draw_panel(screen, panel, controller.time, font=font, axis_color=BLACK)

def main():
    setup_logging(logging.INFO)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("LC Oscillatory Circuit")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 20)

    controller = RunController(
        delta_time=DELTA_TIME,
        charges_count=CHARGES_COUNT,
        charges_value=CHARGES_VALUE,
        loop_size=LOOP_SIZE,
        loop_origin=LOOP_ORIGIN,
        panel_size=PANEL_SIZE,
        panel_origins=PANEL_ORIGINS,
        periods=PERIODS,
        sample_density=SAMPLE_DENSITY,
    )

    # spawn DearPyGui controller process (protected inside main)
    _mgr = Manager()
    _shared = _mgr.dict()
    _shared['capacitance'] = DEFAULT_CAPACITANCE
    _shared['inductance'] = DEFAULT_INDUCTANCE
    _shared['max_voltage'] = DEFAULT_PEAK_VOLTAGE
    _shared['toggle_run'] = False
    _shared['running'] = False
    _shared['error'] = ''
    _shared['__exit__'] = False
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                # same as the panel's Start/Stop button
                _shared['toggle_run'] = True

        if _shared.get('__exit__', False):
            running = False

        # --- Update ---
        controller.sync(_shared)
        controller.tick()

        # --- Draw ---
        draw(screen, controller, font)
        pygame.display.flip()
        clock.tick(FPS)

    logger.info("shutting down")

    # cleanup: signal GUI to exit and join
    _shared['__exit__'] = True
    _gui_proc.join(timeout=1.0)

    pygame.quit()

if __name__ == "__main__":
    main()
