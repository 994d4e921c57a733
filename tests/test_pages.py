import pytest


@pytest.mark.web
@pytest.mark.parametrize(
    "path, heading",
    [
        ("/", "Hi! I'm Yimin."),
        ("/projects", "Projects"),
        ("/writing", "Writing"),
        ("/learning", "Learning"),
        ("/funsies", "Funsies"),
    ],
)
def test_each_path_renders_its_view(client, soup, path, heading):
    r = client.get(path)
    assert r.status_code == 200
    s = soup(r.data)
    main = s.select_one("main.page")
    headings = [h.get_text(strip=True) for h in main.find_all(["h1", "h2"])]
    assert headings.count(heading) == 1


@pytest.mark.web
def test_writing_heading_appears_once(client, soup):
    s = soup(client.get("/writing").data)
    assert [h.get_text(strip=True) for h in s.find_all("h1")] == ["Writing"]
    assert "Essays, reflections" in s.text


@pytest.mark.web
@pytest.mark.parametrize("section_id, title", [("learning", "Learning"), ("funsies", "Funsies")])
def test_section_wrapper(client, soup, section_id, title):
    s = soup(client.get(f"/{section_id}").data)
    sec = s.select_one(f"section#{section_id}.section")
    assert sec is not None
    assert sec.select_one("h2.section-title").get_text(strip=True) == title
    assert sec.find("p") is not None


@pytest.mark.web
@pytest.mark.parametrize("path", ["/nowhere", "/projects/", "/Projects", "/writing/extra"])
def test_unmatched_paths_render_not_found(client, soup, path):
    r = client.get(path)
    assert r.status_code == 404
    s = soup(r.data)
    assert s.find("h1").get_text(strip=True) == "Page not found"
    # navbar still mounted above the not-found view
    assert s.select_one('[data-testid="navbar"]') is not None


@pytest.mark.web
def test_home_social_links(client, soup):
    s = soup(client.get("/").data)
    links = s.select('[data-testid="social-links"] a')
    assert [a["aria-label"] for a in links] == ["GitHub", "LinkedIn", "Email", "Twitter"]
    by_label = {a["aria-label"]: a for a in links}
    assert by_label["Email"]["href"].startswith("mailto:")
    assert not by_label["Email"].has_attr("target")
    for label in ("GitHub", "LinkedIn", "Twitter"):
        assert by_label[label]["target"] == "_blank"
        assert by_label[label]["rel"] == ["noreferrer"]


@pytest.mark.web
def test_home_profile_image_served(client, soup):
    s = soup(client.get("/").data)
    src = s.select_one("img.avatar")["src"]
    assert client.get(src).status_code == 200


@pytest.mark.web
def test_current_page_marked_in_navbar(client, soup):
    s = soup(client.get("/learning").data)
    current = s.select('[data-testid="navbar"] [aria-current="page"]')
    assert [a["data-label"] for a in current] == ["Learning"]
