import streamlit as st

import config
from controller import PricePredictionController
from logging_config import setup_logging

# ────────────────────────────────────────────────
# Streamlit config
# ────────────────────────────────────────────────
st.set_page_config(page_title=config.PAGE_TITLE, layout="centered")
setup_logging(config.LOG_LEVEL, config.LOG_FILE)

# ────────────────────────────────────────────────
# Session state
# ────────────────────────────────────────────────
if 'controller' not in st.session_state:
    st.session_state.controller = PricePredictionController()

controller = st.session_state.controller


# ────────────────────────────────────────────────
# Alert
# ────────────────────────────────────────────────
def show_alert(title, message):
    """Modal alert that only the OK button closes."""
    @st.dialog(title, dismissible=False)
    def alert():
        st.write(message)
        if st.button(config.DISMISS_LABEL, key="dismiss_alert"):
            controller.dismiss_alert()
            st.rerun()

    alert()


def stepper(label, value, bounds, key):
    """Number input with +/- buttons; the widget itself enforces the bounds."""
    col_label, col_input = st.columns([1, 2])
    new_value = col_input.number_input(
        label,
        min_value=bounds.minimum,
        max_value=bounds.maximum,
        value=value,
        step=bounds.step,
        key=key,
        label_visibility="collapsed",
    )
    col_label.markdown(f"**{label}: {int(new_value)}**")
    return int(new_value)


# ────────────────────────────────────────────────
# Screen
# ────────────────────────────────────────────────
st.title(config.PAGE_TITLE)
st.header(config.HEADING)

controller.set_rooms(stepper("Rooms", controller.rooms, controller.rooms_stepper, "rooms"))
controller.set_age(stepper("Age", controller.age, controller.age_stepper, "age"))

if st.button(config.CALCULATE_LABEL, type="primary", key="calculate"):
    controller.calculate_price()

if controller.alert_visible:
    show_alert(controller.alert_title, controller.alert_message)
