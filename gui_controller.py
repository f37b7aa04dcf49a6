import time
import dearpygui.dearpygui as dpg

def _make_callbacks(shared):
    def capacitance_cb(sender, app_data, user_data):
        shared['capacitance'] = float(app_data)
    def inductance_cb(sender, app_data, user_data):
        shared['inductance'] = float(app_data)
    def voltage_cb(sender, app_data, user_data):
        shared['max_voltage'] = float(app_data)
    def run_cb():
        shared['toggle_run'] = True
    def exit_cb():
        shared['__exit__'] = True
    return capacitance_cb, inductance_cb, voltage_cb, run_cb, exit_cb

def _format_readout(value, unit):
    if value is None:
        return "-"
    return f"{value:.6g} {unit}"

def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes circuit parameters and the
    start/stop request into `shared`, shows readouts written back by main.
    """
    dpg.create_context()

    capacitance_cb, inductance_cb, voltage_cb, run_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="LC Circuit", tag="controls_window", width=380, height=320):
        dpg.add_text("Circuit parameters")
        dpg.add_spacer()
        dpg.add_input_float(label="Capacitance, F", tag="capacitance_input", format="%.6g",
                            default_value=float(shared.get('capacitance', 1.0)), callback=capacitance_cb)
        dpg.add_input_float(label="Inductance, H", tag="inductance_input", format="%.6g",
                            default_value=float(shared.get('inductance', 1.0)), callback=inductance_cb)
        dpg.add_input_float(label="Max voltage, V", tag="voltage_input", format="%.6g",
                            default_value=float(shared.get('max_voltage', 10.0)), callback=voltage_cb)
        dpg.add_separator()
        dpg.add_button(label="Start", tag="run_button", callback=lambda s, a, u: run_cb())
        dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("", tag="max_charge_text")
        dpg.add_text("", tag="max_energy_text")
        dpg.add_text("", tag="frequency_text")
        dpg.add_text("", tag="error_text", color=(255, 80, 80))

    dpg.create_viewport(title='LC Circuit Controls', width=400, height=340)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            dpg.set_item_label("run_button", "Stop" if shared.get('running', False) else "Start")
            dpg.set_value("max_charge_text", "Max charge: " + _format_readout(shared.get('max_charge'), "C"))
            dpg.set_value("max_energy_text", "Energy: " + _format_readout(shared.get('max_energy'), "J"))
            dpg.set_value("frequency_text", "Angular frequency: " + _format_readout(shared.get('frequency'), "rad/s"))
            dpg.set_value("error_text", shared.get('error', ''))

            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()

if __name__ == "__main__":
    from multiprocessing import Manager
    mgr = Manager()
    shared = mgr.dict()
    shared['capacitance'] = 1.0
    shared['inductance'] = 1.0
    shared['max_voltage'] = 10.0
    run_gui(shared)
