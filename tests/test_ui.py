def test_ui_renders_default_table(client):
    resp = client.get("/ui")
    assert resp.status_code == 200
    html = resp.text
    assert "台新銀行" in html
    assert "最優" in html
    assert "最差" in html
    # 1992 * 21.883 - 200
    assert 'data-copy="43390.94"' in html
    assert "NT$43,391" in html


def test_ui_lenient_query_parsing(client):
    html = client.get("/ui", params={"aud_amount": "1000abc", "aud_fee": "x"}).text
    # 1000 net AUD, formatted with no fraction digits
    assert ">1,000<" in html


def test_ui_save_and_reset_banks(client):
    form = {
        "name": ["Alpha", "", "Beta"],
        "usd_to_twd_rate": ["31.5", "", "31.2"],
        "aud_to_twd_rate": ["21.9", "", "oops"],
        "in_fee_twd": ["0", "", "15"],
    }
    resp = client.post("/ui/banks", data=form, follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/ui"

    banks = client.get("/banks").json()["banks"]
    assert [b["name"] for b in banks] == ["Alpha", "Beta"]
    assert banks[1]["aud_to_twd_rate"] == 0.0
    assert banks[1]["in_fee_twd"] == 15.0

    html = client.get("/ui").text
    assert "Alpha" in html and "台新銀行" not in html

    resp = client.post("/ui/banks/reset", follow_redirects=False)
    assert resp.status_code == 303
    assert client.get("/banks").json()["is_default"] is True
