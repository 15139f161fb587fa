# tests/test_admin.py


def test_product_index_lists_and_filters(client, make_category, make_product):
    cat = make_category("Kitap", 3)
    make_product(cat["id"], title="Atlas", stock=8)
    make_product(cat["id"], title="Novel", stock=3, published=True)

    r = client.get("/admin/products")
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Atlas" in html and "Novel" in html

    html = client.get("/admin/products?isPublished=true").get_data(as_text=True)
    assert "Novel" in html
    assert "Atlas" not in html


def test_product_index_flashes_bad_filter(client):
    r = client.get("/admin/products?minStock=9&maxStock=1")
    assert r.status_code == 200
    assert "Minimum stock cannot be greater than maximum stock" in r.get_data(as_text=True)


def test_add_form_warns_without_categories(client):
    r = client.get("/admin/products/add")
    assert r.status_code == 200
    assert "No categories exist yet" in r.get_data(as_text=True)


def test_add_product_via_form(client, make_category):
    cat = make_category("Elektronik", 5)

    r = client.post(
        "/admin/products/add",
        data={"title": "Laptop", "categoryId": str(cat["id"]), "stockQuantity": "9", "isPublished": "true"},
    )
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/admin/products")

    page = client.get("/api/products").get_json()["data"]
    assert page["totalCount"] == 1
    assert page["data"][0]["isPublished"] is True


def test_add_product_shows_rule_error_next_to_field(client, make_category):
    cat = make_category("Elektronik", 5)

    r = client.post(
        "/admin/products/add",
        data={"title": "Mouse", "categoryId": str(cat["id"]), "stockQuantity": "2"},
    )
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Stock quantity must be at least 5" in html
    assert "is-invalid" in html
    assert client.get("/api/products").get_json()["data"]["totalCount"] == 0


def test_add_product_shape_errors(client, make_category):
    make_category("Elektronik", 0)

    r = client.post("/admin/products/add", data={"title": "", "categoryId": "", "stockQuantity": "x"})
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Select a valid category" in html
    assert "String should have at least 1 character" in html


def test_detail_edit_and_delete(client, make_category, make_product):
    cat = make_category("Kitap", 3)
    product = make_product(cat["id"], title="Atlas", stock=8)
    pid = product["id"]

    r = client.get(f"/admin/products/{pid}")
    assert r.status_code == 200
    assert "Atlas" in r.get_data(as_text=True)

    r = client.get(f"/admin/products/{pid}/edit")
    assert r.status_code == 200
    assert 'value="Atlas"' in r.get_data(as_text=True)

    r = client.post(
        f"/admin/products/{pid}/edit",
        data={"title": "World Atlas", "categoryId": str(cat["id"]), "stockQuantity": "8"},
    )
    assert r.status_code == 302
    assert client.get(f"/api/products/{pid}").get_json()["data"]["title"] == "World Atlas"

    r = client.get(f"/admin/products/{pid}/delete")
    assert r.status_code == 200
    assert "World Atlas" in r.get_data(as_text=True)

    r = client.post(f"/admin/products/{pid}/delete")
    assert r.status_code == 302
    assert client.get(f"/api/products/{pid}").status_code == 404


def test_missing_product_pages_are_html_404(client):
    for url in ("/admin/products/99", "/admin/products/99/edit", "/admin/products/99/delete"):
        r = client.get(url)
        assert r.status_code == 404, url
        assert r.is_json is False


def test_category_pages(client, make_category, make_product):
    cat = make_category("Kitap", 3)
    make_product(cat["id"], title="Novel", stock=3)

    html = client.get("/admin/categories").get_data(as_text=True)
    assert "Kitap" in html

    r = client.post("/admin/categories/add", data={"name": "kitap", "minimumStockQuantity": "1"})
    assert r.status_code == 200
    assert "A category with this name already exists" in r.get_data(as_text=True)

    r = client.post("/admin/categories/add", data={"name": "Giyim", "minimumStockQuantity": "10"})
    assert r.status_code == 302
    assert len(client.get("/api/categories").get_json()["data"]) == 2

    r = client.post(
        f"/admin/categories/{cat['id']}/edit",
        data={"name": "Kitap", "description": "Books", "minimumStockQuantity": "2"},
    )
    assert r.status_code == 302
    assert client.get(f"/api/categories/{cat['id']}").get_json()["data"]["description"] == "Books"


def test_deleting_category_in_use_is_flashed(client, make_category, make_product):
    cat = make_category("Kitap", 3)
    make_product(cat["id"], title="Novel", stock=3)

    r = client.post(f"/admin/categories/{cat['id']}/delete", follow_redirects=True)
    assert r.status_code == 200
    assert "This category has 1 product(s)." in r.get_data(as_text=True)
    assert client.get(f"/api/categories/{cat['id']}").status_code == 200

    empty = make_category("Empty", 0)
    r = client.post(f"/admin/categories/{empty['id']}/delete", follow_redirects=True)
    assert "Category deleted." in r.get_data(as_text=True)
    assert client.get(f"/api/categories/{empty['id']}").status_code == 404
