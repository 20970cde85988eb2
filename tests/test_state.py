from solarquote import state


def test_each_flow_keeps_its_own_quote():
    assert "quote" not in state.DEFAULT_STATE
    for key in ("calculator_quote", "wizard_quote", "quick_quote"):
        assert state.DEFAULT_STATE[key] is None


def test_reset_wizard_keeps_other_pages(monkeypatch):
    monkeypatch.setattr(state.st, "session_state", {})
    state.init_state()
    state.st.session_state["calculator_quote"] = "calculator"
    state.st.session_state["wizard_quote"] = "wizard"
    state.st.session_state["wizard_step"] = 3
    state.reset_wizard()
    assert state.st.session_state["calculator_quote"] == "calculator"
    assert state.st.session_state["wizard_quote"] is None
    assert state.st.session_state["wizard_step"] == 1


def test_init_state_copies_nested_defaults(monkeypatch):
    monkeypatch.setattr(state.st, "session_state", {})
    state.init_state()
    state.st.session_state["customer"]["firstName"] = "Ali"
    assert state.DEFAULT_STATE["customer"]["firstName"] == ""
