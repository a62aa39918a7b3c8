"""HTML gallery generation."""

import html as html_lib
import json
from collections.abc import Callable, Sequence
from pathlib import Path

from .controller import COLLAPSE_DELAY_MS, GalleryController
from .filtering import DEFAULT_TAG_ORDER, build_cards
from .loader import LoadResult, load_records
from .models import FilterState, ProjectCard

GALLERY_FILENAME = "gallery.html"

STYLE = '''
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
            background: #111;
            color: #eee;
            padding: 24px;
        }
        h1 { font-size: 22px; font-weight: 500; margin-bottom: 16px; }
        .filter-bar {
            position: relative;
            display: flex;
            align-items: center;
            gap: 8px;
            margin-bottom: 20px;
            min-height: 32px;
        }
        #filter-placeholder {
            color: #888;
            font-size: 18px;
            cursor: pointer;
        }
        #filter-placeholder:hover { color: #ccc; }
        #selected-tags {
            display: flex;
            flex-wrap: wrap;
            gap: 6px;
            cursor: pointer;
        }
        .selected-tag {
            display: inline-flex;
            align-items: center;
            gap: 6px;
            padding: 3px 10px;
            font-size: 14px;
            background: #333;
            border-radius: 14px;
        }
        .selected-tag .tag-name { cursor: pointer; }
        .selected-tag .tag-remove { color: #888; cursor: pointer; }
        .selected-tag .tag-remove:hover { color: #f88; }
        .dropdown-menu {
            display: none;
            align-items: center;
            flex-wrap: wrap;
        }
        .dropdown-menu.show { display: flex; }
        .dropdown-separator {
            color: #666;
            font-size: 18px;
            pointer-events: none;
        }
        .dropdown-option {
            font-size: 18px;
            color: #aaa;
            cursor: pointer;
        }
        .dropdown-option:hover { color: #fff; }
        .dropdown-option.selected { color: #fff; text-decoration: underline; }
        #projects-container {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(280px, 1fr));
            gap: 16px;
        }
        .project-card {
            background: #1c1c1c;
            border-radius: 8px;
            overflow: hidden;
            cursor: pointer;
            transition: transform ''' + str(COLLAPSE_DELAY_MS) + '''ms ease, background ''' + str(COLLAPSE_DELAY_MS) + '''ms ease;
        }
        .project-card.hidden { display: none; }
        .project-card.expanded {
            grid-column: span 2;
            background: #262626;
        }
        .project-card.collapsing { background: #1c1c1c; }
        .project-video-container { aspect-ratio: 16/9; background: #000; }
        .project-video, .project-image {
            width: 100%;
            height: 100%;
            object-fit: cover;
            display: block;
        }
        .no-video {
            display: flex;
            align-items: center;
            justify-content: center;
            height: 100%;
            color: #666;
            font-size: 13px;
        }
        .project-name { font-size: 15px; font-weight: 500; padding: 10px 12px; }
        .project-info, .project-brief {
            padding: 0 12px 10px;
            font-size: 13px;
            color: #aaa;
            line-height: 1.5;
        }
        .project-card.expanded .project-info,
        .project-card.expanded .project-brief { animation: reveal ''' + str(COLLAPSE_DELAY_MS) + '''ms ease; }
        .project-card.collapsing .project-info,
        .project-card.collapsing .project-brief { animation: conceal ''' + str(COLLAPSE_DELAY_MS) + '''ms ease forwards; }
        @keyframes reveal { from { opacity: 0; } to { opacity: 1; } }
        @keyframes conceal { from { opacity: 1; } to { opacity: 0; } }
        .project-counter {
            margin-top: 24px;
            font-size: 13px;
            color: #777;
        }
'''


def render_media(card: ProjectCard) -> str:
    """Video if present, else image, else a placeholder."""
    src = html_lib.escape(card.media_src)
    if card.media_kind == "video":
        return f'''<video class="project-video" preload="metadata" loop playsinline>
                    <source src="{src}" type="video/mp4">
                    <source src="{src}" type="video/quicktime">
                    Your browser doesn't support video.
                </video>'''
    if card.media_kind == "image":
        return f'<img class="project-image" src="{src}" alt="{html_lib.escape(card.name)}">'
    return '<div class="no-video">No media available</div>'


def render_card(card: ProjectCard, visible: bool = True) -> str:
    """Build one project card with its collapsed detail regions."""
    hidden = "" if visible else " hidden"
    tags_attr = html_lib.escape(json.dumps(card.tags))
    team_html = f'<p class="project-team">by {html_lib.escape(card.team)}</p>' if card.team else ""
    year_html = f'<p class="project-year">{html_lib.escape(card.year)}</p>' if card.year else ""
    brief_html = f'<p>{html_lib.escape(card.brief)}</p>' if card.brief else ""
    return f'''        <div class="project-card{hidden}" data-project-index="{card.index}" data-tags="{tags_attr}">
            <div class="project-video-container">
                {render_media(card)}
            </div>
            <h3 class="project-name">{html_lib.escape(card.name)}</h3>
            <div class="project-info" style="display: none;">
                <div class="project-meta">
                    {team_html}
                    {year_html}
                </div>
            </div>
            <div class="project-brief" style="display: none;">
                {brief_html}
            </div>
        </div>
'''


def _script_json(value) -> str:
    # Escape </script> to prevent XSS when embedding in HTML
    return json.dumps(value).replace('</', '<\\/')


def build_gallery_html(
    result: LoadResult,
    tag_order: Sequence[str] = DEFAULT_TAG_ORDER,
    filters: FilterState | None = None,
    title: str = "Projects",
) -> str:
    """Render the full gallery page for a load result."""
    filters = filters if filters is not None else FilterState()

    if result.ok:
        controller = GalleryController(result.records, tag_order, filters)
        # Every eligible card is emitted; the selection only hides cards
        content = "".join(
            render_card(card, visible=filters.matches(card.tags))
            for card in build_cards(controller.context.eligible)
        )
        counter = f'    <p id="project-counter" class="project-counter">{controller.counter_text}</p>\n'
    else:
        content = f"        <p>{html_lib.escape(result.message)}</p>\n"
        counter = ""

    title_escaped = html_lib.escape(title)
    html = f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title_escaped}</title>
    <style>{STYLE}    </style>
</head>
<body>
    <h1>{title_escaped}</h1>
    <div class="filter-bar">
        <span id="filter-placeholder">Filter by tag</span>
        <div id="selected-tags"></div>
        <div id="dropdown-menu" class="dropdown-menu"></div>
    </div>
    <div id="projects-container">
{content}    </div>
{counter}'''

    html += f'''    <script>
        const COLLAPSE_DELAY_MS = {COLLAPSE_DELAY_MS};
        const hasProjects = {_script_json(result.ok)};
        const tagOrder = {_script_json(list(tag_order))};
        const selectedFilters = {_script_json(list(filters.selected))};
        const container = document.getElementById('projects-container');
        const dropdownMenu = document.getElementById('dropdown-menu');
        const placeholder = document.getElementById('filter-placeholder');
        const selectedTagsContainer = document.getElementById('selected-tags');
        const cards = Array.from(container.querySelectorAll('.project-card'));
        const collapseTimers = new Map();

        function cardTags(card) {{
            return JSON.parse(card.dataset.tags || '[]');
        }}

        function setDetailsVisible(card, visible) {{
            card.querySelectorAll('.project-info, .project-brief').forEach(el => {{
                el.style.display = visible ? 'block' : 'none';
            }});
        }}

        function cancelCollapse(card) {{
            const timer = collapseTimers.get(card);
            if (timer !== undefined) {{
                clearTimeout(timer);
                collapseTimers.delete(card);
            }}
            card.classList.remove('collapsing');
        }}

        function collapseProject(card) {{
            cancelCollapse(card);
            card.classList.add('collapsing');
            card.classList.remove('expanded');
            collapseTimers.set(card, setTimeout(() => {{
                collapseTimers.delete(card);
                setDetailsVisible(card, false);
                card.classList.remove('collapsing');
            }}, COLLAPSE_DELAY_MS));
        }}

        function toggleProjectExpansion(card) {{
            const isExpanded = card.classList.contains('expanded');
            container.querySelectorAll('.project-card.expanded').forEach(other => {{
                if (other !== card) collapseProject(other);
            }});
            if (isExpanded) {{
                collapseProject(card);
            }} else {{
                cancelCollapse(card);
                card.classList.add('expanded');
                setDetailsVisible(card, true);
            }}
        }}

        function resetCard(card) {{
            cancelCollapse(card);
            card.classList.remove('expanded');
            setDetailsVisible(card, false);
            const video = card.querySelector('.project-video');
            if (video) {{
                video.pause();
                video.currentTime = 0;
            }}
        }}

        function renderProjects() {{
            let shown = 0;
            cards.forEach(card => {{
                resetCard(card);
                const tags = cardTags(card);
                const visible = selectedFilters.length === 0 || selectedFilters.some(f => tags.includes(f));
                card.classList.toggle('hidden', !visible);
                if (visible) shown++;
            }});
            document.getElementById('project-counter').textContent = `Showing: ${{shown}}/${{cards.length}}`;
        }}

        function separator() {{
            const slash = document.createElement('span');
            slash.className = 'dropdown-separator';
            slash.textContent = ' / ';
            return slash;
        }}

        function populateTagFilter() {{
            const allTags = new Set();
            cards.forEach(card => cardTags(card).forEach(tag => allTags.add(tag)));
            const existingTags = tagOrder.filter(tag => allTags.has(tag));
            dropdownMenu.innerHTML = '';
            existingTags.forEach(tag => {{
                dropdownMenu.appendChild(separator());
                const option = document.createElement('span');
                option.className = 'dropdown-option';
                option.dataset.value = tag;
                option.textContent = tag;
                if (selectedFilters.includes(tag)) option.classList.add('selected');
                dropdownMenu.appendChild(option);
            }});
        }}

        function updateFilterDisplay() {{
            selectedTagsContainer.innerHTML = '';
            placeholder.style.display = selectedFilters.length === 0 ? 'inline' : 'none';
            selectedFilters.forEach(tag => {{
                const chip = document.createElement('span');
                chip.className = 'selected-tag';
                const name = document.createElement('span');
                name.className = 'tag-name';
                name.textContent = tag;
                name.addEventListener('click', e => {{
                    e.stopPropagation();
                    toggleDropdown();
                }});
                const remove = document.createElement('span');
                remove.className = 'tag-remove';
                remove.dataset.tag = tag;
                remove.textContent = '×';
                remove.addEventListener('click', e => {{
                    e.stopPropagation();
                    removeFilterTag(tag);
                }});
                chip.append(name, remove);
                selectedTagsContainer.appendChild(chip);
            }});
            dropdownMenu.querySelectorAll('.dropdown-option').forEach(option => {{
                option.classList.toggle('selected', selectedFilters.includes(option.dataset.value));
            }});
        }}

        function toggleTagFilter(tag) {{
            const index = selectedFilters.indexOf(tag);
            if (index > -1) {{
                selectedFilters.splice(index, 1);
            }} else {{
                selectedFilters.push(tag);
            }}
            updateFilterDisplay();
            dropdownMenu.classList.remove('show');
            renderProjects();
        }}

        function removeFilterTag(tag) {{
            const index = selectedFilters.indexOf(tag);
            if (index > -1) {{
                selectedFilters.splice(index, 1);
                updateFilterDisplay();
                renderProjects();
            }}
        }}

        function toggleDropdown() {{
            if (dropdownMenu.classList.contains('show')) {{
                dropdownMenu.classList.remove('show');
            }} else {{
                populateTagFilter();
                dropdownMenu.classList.add('show');
            }}
        }}

        placeholder.addEventListener('click', e => {{
            e.stopPropagation();
            toggleDropdown();
        }});

        selectedTagsContainer.addEventListener('click', e => {{
            if (e.target === selectedTagsContainer) {{
                e.stopPropagation();
                toggleDropdown();
            }}
        }});

        dropdownMenu.addEventListener('click', e => {{
            if (e.target.classList.contains('dropdown-option')) {{
                toggleTagFilter(e.target.dataset.value);
            }}
        }});

        document.addEventListener('click', e => {{
            if (!placeholder.contains(e.target) &&
                !selectedTagsContainer.contains(e.target) &&
                !dropdownMenu.contains(e.target)) {{
                dropdownMenu.classList.remove('show');
            }}
        }});

        cards.forEach(card => {{
            const video = card.querySelector('.project-video');
            if (video) {{
                card.addEventListener('mouseenter', () => {{
                    video.play().catch(err => console.log('Play failed:', err));
                }});
                card.addEventListener('mouseleave', () => {{
                    video.pause();
                    video.currentTime = 0;
                }});
            }}
            card.addEventListener('click', () => toggleProjectExpansion(card));
        }});

        updateFilterDisplay();
        if (hasProjects) renderProjects();
    </script>
</body>
</html>
'''
    return html


def generate_gallery(
    data_path: Path,
    output_dir: Path,
    tag_order: Sequence[str] = DEFAULT_TAG_ORDER,
    filters: FilterState | None = None,
    title: str = "Projects",
    log: Callable[[str], None] = print,
) -> Path:
    """Generate gallery.html in output_dir from the project document."""
    log("Generating gallery...")
    result = load_records(data_path, log=log)
    html = build_gallery_html(result, tag_order, filters, title)

    output_dir.mkdir(parents=True, exist_ok=True)
    gallery_path = output_dir / GALLERY_FILENAME
    gallery_path.write_text(html, encoding="utf-8")
    log(f"  Gallery: {gallery_path}")
    return gallery_path
