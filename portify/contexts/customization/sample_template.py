"""
Built-in sample template.

Uses every profile marker and both loop region kinds, so it doubles as the
reference for template authors and as a seed for manual testing.
"""

from portify.contexts.customization.portfolio_data_structure import TemplateSource

SAMPLE_HTML = """
<div class="portfolio-container">
    <header class="hero">
        <img src="{{profilePhotoUrl}}" alt="{{name}}" class="profile-photo">
        <h1>{{name}}</h1>
        <p class="tagline">{{tagline}}</p>
        <p class="profession">{{profession}}</p>
    </header>

    <section class="about">
        <h2>About Me</h2>
        <p>{{bio}}</p>
    </section>

    <section class="projects">
        <h2>Projects</h2>
        <div class="projects-grid">
            <!-- PROJECTS_START -->
            <div class="project-card">
                <img src="{{project.imageUrl}}" alt="{{project.title}}">
                <h3>{{project.title}}</h3>
                <p>{{project.description}}</p>
                <p class="tags">{{project.tags}}</p>
                <a href="{{project.projectUrl}}" target="_blank">View Project</a>
            </div>
            <!-- PROJECTS_END -->
        </div>
    </section>

    <section class="social">
        <h2>Connect With Me</h2>
        <div class="social-links">
            <!-- SOCIAL_LINKS_START -->
            <a href="{{social.url}}" target="_blank" class="social-link {{social.platformLower}}">
                {{social.platform}}
            </a>
            <!-- SOCIAL_LINKS_END -->
        </div>
    </section>

    <footer class="site-footer">
        <p>{{subdomain}}.portify.io {{customDomain}}</p>
    </footer>
</div>
"""

SAMPLE_CSS = """
* {
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}

body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
    line-height: 1.6;
    color: #333;
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    min-height: 100vh;
    padding: 2rem;
}

.portfolio-container {
    max-width: 1200px;
    margin: 0 auto;
    background: white;
    border-radius: 20px;
    padding: 3rem;
    box-shadow: 0 20px 60px rgba(0,0,0,0.3);
}

.hero {
    text-align: center;
    padding: 2rem 0;
    border-bottom: 2px solid #f0f0f0;
    margin-bottom: 3rem;
}

.profile-photo {
    width: 150px;
    height: 150px;
    border-radius: 50%;
    object-fit: cover;
    border: 5px solid #667eea;
    margin-bottom: 1rem;
}

h1 {
    font-size: 2.5rem;
    color: #667eea;
    margin-bottom: 0.5rem;
}

.tagline {
    font-size: 1.2rem;
    color: #666;
    margin-bottom: 0.5rem;
}

.profession {
    display: inline-block;
    background: #667eea;
    color: white;
    padding: 0.5rem 1.5rem;
    border-radius: 20px;
    font-size: 0.9rem;
}

.about, .projects, .social {
    margin-bottom: 3rem;
}

h2 {
    font-size: 2rem;
    margin-bottom: 1.5rem;
    border-left: 4px solid #667eea;
    padding-left: 1rem;
}

.projects-grid {
    display: grid;
    grid-template-columns: repeat(auto-fill, minmax(300px, 1fr));
    gap: 2rem;
}

.project-card {
    background: #f8f9fa;
    border-radius: 10px;
    padding: 1.5rem;
    transition: transform 0.3s;
}

.project-card:hover {
    transform: translateY(-5px);
    box-shadow: 0 10px 20px rgba(0,0,0,0.1);
}

.project-card img {
    width: 100%;
    height: 200px;
    object-fit: cover;
    border-radius: 8px;
    margin-bottom: 1rem;
}

.project-card h3 {
    color: #667eea;
    margin-bottom: 0.5rem;
}

.tags {
    color: #666;
    font-size: 0.9rem;
    margin-top: 0.5rem;
}

.project-card a {
    display: inline-block;
    margin-top: 1rem;
    color: #667eea;
    text-decoration: none;
    font-weight: 600;
}

.social-links {
    display: flex;
    gap: 1rem;
    flex-wrap: wrap;
}

.social-link {
    display: inline-block;
    padding: 0.75rem 1.5rem;
    background: #667eea;
    color: white;
    text-decoration: none;
    border-radius: 8px;
    transition: background 0.3s;
}

.social-link:hover {
    background: #764ba2;
}

.site-footer {
    text-align: center;
    color: #999;
    font-size: 0.8rem;
}
"""

SAMPLE_JS = """
console.log('Portfolio for {{name}} loaded successfully!');
"""


def get_sample_template() -> TemplateSource:
    """Return a fresh copy of the built-in sample template (identical on every call)."""
    return TemplateSource(html=SAMPLE_HTML, css=SAMPLE_CSS, js=SAMPLE_JS)
