"""Installation form page served by the reference service.

Markup matches what pages.charge_point_page.ChargePointPage drives: an input
named ``input-serial-number``, a ``button.addButton``, and one row per charge
point carrying its id in ``data-id`` with ``.list-text`` and ``.list-button``.
"""
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])

INSTALLATION_FORM_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Charge Point Installation Form</title>
</head>
<body>
  <h1>Charge Point Installation Form</h1>
  <form id="add-form">
    <input name="input-serial-number" placeholder="Serial number" autocomplete="off">
    <button type="submit" class="addButton" disabled>Add</button>
  </form>
  <p class="error-message" role="alert"></p>
  <div id="serial-list"></div>
  <script>
    const API = "/charge-point";
    const input = document.querySelector("input[name='input-serial-number']");
    const addButton = document.querySelector("button.addButton");
    const list = document.getElementById("serial-list");
    const error = document.querySelector(".error-message");

    function syncButton() {
      addButton.disabled = input.value.trim() === "";
    }

    function render(items) {
      list.replaceChildren(...items.map((cp) => {
        const row = document.createElement("div");
        row.className = "list-item";
        row.dataset.id = cp.id;
        const text = document.createElement("span");
        text.className = "list-text";
        text.textContent = cp.serialNumber;
        const del = document.createElement("button");
        del.className = "list-button";
        del.type = "button";
        del.textContent = "Delete";
        del.addEventListener("click", () => remove(cp.id));
        row.append(text, del);
        return row;
      }));
    }

    async function refresh() {
      const r = await fetch(API, {headers: {"Accept": "application/json"}});
      render(await r.json());
    }

    async function remove(id) {
      await fetch(API + "/" + encodeURIComponent(id), {method: "DELETE"});
      await refresh();
    }

    document.getElementById("add-form").addEventListener("submit", async (event) => {
      event.preventDefault();
      error.textContent = "";
      const r = await fetch(API, {
        method: "POST",
        headers: {"Content-Type": "application/json"},
        body: JSON.stringify({serialNumber: input.value}),
      });
      if (r.ok) {
        input.value = "";
        syncButton();
      } else {
        error.textContent = (await r.json()).detail || "Could not add serial number";
      }
      await refresh();
    });

    input.addEventListener("input", syncButton);
    syncButton();
    refresh();
  </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def installation_form() -> str:
    """Serve the installation form."""
    return INSTALLATION_FORM_HTML
