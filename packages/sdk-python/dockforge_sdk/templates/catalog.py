"""
Fragment Catalog
================

Every piece of generated text lives here as a keyed, immutable fragment:
``FragmentKey(category, variant) -> template text``. The renderer picks
fragments by key and never branches on prose, so supporting a new service
means adding entries here and a line in the plan.

Fragments are Jinja2 templates. Indentation is significant for compose
fragments: ``service`` fragments start at two spaces under ``services:``,
``compose-env`` fragments continue the ``web`` service at four spaces.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple

from dockforge_common import ServiceImages, TemplateIntegrityError


class FragmentKey(NamedTuple):
    """Catalog key of a fragment."""

    category: str
    variant: str

    @property
    def template_name(self) -> str:
        """Name under which the fragment is registered with the Jinja2 loader."""
        return f"{self.category}/{self.variant}"

    def __str__(self) -> str:
        return self.template_name


# ============================================================================
# Lookup tables
# ============================================================================

HEALTH_PATHS: Mapping[str, str] = MappingProxyType(
    {
        "flask": "/health",
        "django": "/health/",
        "fastapi": "/health",
        "streamlit": "/_stcore/health",
    }
)
"""HTTP health endpoints per framework; frameworks missing here get a TCP probe."""

DEV_RELOAD_FRAMEWORKS = frozenset({"flask", "django", "fastapi", "streamlit"})
"""Frameworks with a hot-reload development command."""

CREDENTIAL_VARS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "postgresql": MappingProxyType(
            {"user": "POSTGRES_USER", "password": "POSTGRES_PASSWORD", "database": "POSTGRES_DB"}
        ),
        "mysql": MappingProxyType(
            {
                "user": "MYSQL_USER",
                "password": "MYSQL_PASSWORD",
                "database": "MYSQL_DATABASE",
                "root_password": "MYSQL_ROOT_PASSWORD",
            }
        ),
        "mongodb": MappingProxyType(
            {
                "user": "MONGO_INITDB_ROOT_USERNAME",
                "password": "MONGO_INITDB_ROOT_PASSWORD",
                "database": "MONGO_INITDB_DATABASE",
            }
        ),
        "rabbitmq": MappingProxyType(
            {"user": "RABBITMQ_DEFAULT_USER", "password": "RABBITMQ_DEFAULT_PASS"}
        ),
    }
)
"""Environment variable names holding service credentials."""

IMAGES: Mapping[str, str] = MappingProxyType(
    {
        "postgresql": ServiceImages.POSTGRESQL,
        "mysql": ServiceImages.MYSQL,
        "mongodb": ServiceImages.MONGODB,
        "redis": ServiceImages.REDIS,
        "memcached": ServiceImages.MEMCACHED,
        "nginx": ServiceImages.NGINX,
        "rabbitmq": ServiceImages.RABBITMQ,
    }
)


# ============================================================================
# Dockerfile fragments
# ============================================================================

_DOCKERFILE: Dict[str, str] = {
    "builder": r"""# syntax=docker/dockerfile:1
# Generated by dockforge for {{ project_name }}

# ---- Builder stage: compile wheels for every dependency ----
FROM {{ base_image }} AS builder

ENV PYTHONDONTWRITEBYTECODE=1 \
    PYTHONUNBUFFERED=1 \
    PIP_NO_CACHE_DIR=1 \
    PIP_DISABLE_PIP_VERSION_CHECK=1

WORKDIR /build

RUN apt-get update \
    && apt-get install -y --no-install-recommends build-essential{% for package in build_packages %} {{ package }}{% endfor %} \
    && rm -rf /var/lib/apt/lists/*

COPY requirements.txt .
RUN pip wheel --wheel-dir /wheels -r requirements.txt

""",
    "runtime": r"""# ---- Runtime stage: slim image with prebuilt wheels ----
FROM {{ base_image }} AS runtime

ENV PYTHONDONTWRITEBYTECODE=1 \
    PYTHONUNBUFFERED=1 \
    PIP_NO_CACHE_DIR=1 \
    PIP_DISABLE_PIP_VERSION_CHECK=1

WORKDIR /app

{% if runtime_packages %}
RUN apt-get update \
    && apt-get install -y --no-install-recommends{% for package in runtime_packages %} {{ package }}{% endfor %} \
    && rm -rf /var/lib/apt/lists/*

{% endif %}
COPY --from=builder /wheels /wheels
RUN pip install --no-cache-dir /wheels/* \
    && rm -rf /wheels

""",
    "user": r"""# Run as an unprivileged user
RUN groupadd --system app \
    && useradd --system --gid app --home-dir /app --shell /usr/sbin/nologin app
{% if data_dir %}
RUN mkdir -p {{ data_dir }} && chown app:app {{ data_dir }}
{% endif %}

COPY --chown=app:app . .

USER app

""",
    "expose": """EXPOSE {{ port }}

""",
    "healthcheck-http": r"""HEALTHCHECK --interval=30s --timeout=5s --start-period=20s --retries=3 \
    CMD ["python", "-c", "import urllib.request; urllib.request.urlopen('http://127.0.0.1:{{ port }}{{ health_path }}', timeout=4)"]

""",
    "healthcheck-tcp": r"""HEALTHCHECK --interval=30s --timeout=5s --start-period=20s --retries=3 \
    CMD ["python", "-c", "import socket; socket.create_connection(('127.0.0.1', {{ port }}), timeout=4).close()"]

""",
    "cmd": """CMD {{ command }}
""",
}


# ============================================================================
# Run commands (exec form, JSON arrays)
# ============================================================================

_COMMAND: Dict[str, str] = {
    "flask": '["gunicorn", "--bind", "0.0.0.0:{{ port }}", "--workers", "4", "--access-logfile", "-", "app:app"]',
    "django": '["gunicorn", "--bind", "0.0.0.0:{{ port }}", "--workers", "4", "--access-logfile", "-", "{{ python_module }}.wsgi:application"]',
    "fastapi": '["uvicorn", "main:app", "--host", "0.0.0.0", "--port", "{{ port }}", "--workers", "4", "--proxy-headers"]',
    "streamlit": '["streamlit", "run", "app.py", "--server.port={{ port }}", "--server.address=0.0.0.0", "--server.headless=true"]',
    "cli": '["python", "-m", "{{ python_module }}"]',
    "other": '["python", "app.py"]',
}

_DEV_COMMAND: Dict[str, str] = {
    "flask": '["flask", "--app", "app", "run", "--host", "0.0.0.0", "--port", "{{ port }}", "--debug"]',
    "django": '["python", "manage.py", "runserver", "0.0.0.0:{{ port }}"]',
    "fastapi": '["uvicorn", "main:app", "--host", "0.0.0.0", "--port", "{{ port }}", "--reload"]',
    "streamlit": '["streamlit", "run", "app.py", "--server.port={{ port }}", "--server.address=0.0.0.0", "--server.runOnSave=true"]',
}


# ============================================================================
# Compose fragments
# ============================================================================

_DEPENDS_ON = """{% if depends_on %}
    depends_on:
{% for service, condition in depends_on %}
      {{ service }}:
        condition: {{ condition }}
{% endfor %}
{% endif %}
"""

_COMPOSE: Dict[str, str] = {
    "header": """# Generated by dockforge for {{ project_name }}
name: {{ project_name }}

services:
""",
    "web": """  web:
    build:
      context: .
      dockerfile: Dockerfile
    image: {{ project_name }}-app
    container_name: {{ project_name }}-web
    env_file:
      - .env
{% if exposes_port %}
    ports:
      - "{{ port }}:{{ port }}"
{% endif %}
{% if web_volumes %}
    volumes:
{% for volume in web_volumes %}
      - {{ volume }}
{% endfor %}
{% endif %}
{% with depends_on = web_depends_on %}{% include "compose/depends-on" %}{% endwith %}
    networks:
      - backend
""",
    "depends-on": _DEPENDS_ON,
    "volumes": """
volumes:
{% for volume in named_volumes %}
  {{ volume }}:
{% endfor %}
""",
    "networks": """
networks:
  backend:
    name: {{ network }}
    driver: bridge
""",
    "configs-nginx": """
configs:
  nginx-conf:
    content: |
      upstream app {
        server web:{{ port }};
      }

      server {
        listen 80;
        client_max_body_size 10m;

        location / {
          proxy_pass http://app;
          proxy_set_header Host $$host;
          proxy_set_header X-Real-IP $$remote_addr;
          proxy_set_header X-Forwarded-For $$proxy_add_x_forwarded_for;
          proxy_set_header X-Forwarded-Proto $$scheme;
        }
      }
""",
    "override-header": """# Production overrides for {{ project_name }}
# Usage: docker compose -f docker-compose.yml -f docker-compose.prod.yml up -d
services:
  web:
{% if prod_web_volumes %}
    volumes: !override
{% for volume in prod_web_volumes %}
      - {{ volume }}
{% endfor %}
{% else %}
    volumes: !reset []
{% endif %}
{% if dev_command %}
    command: {{ command }}
{% endif %}
""",
}

_COMPOSE_ENV: Dict[str, str] = {
    "development": """    # Development: source is bind-mounted and the server reloads on change
    environment:
      APP_ENV: development
{% if dev_command %}
    command: {{ dev_command }}
{% endif %}
""",
    "production": """    restart: unless-stopped
    environment:
      APP_ENV: production
    deploy:
      resources:
        limits:
          cpus: "1.0"
          memory: 512M
        reservations:
          memory: 256M
    logging:
      driver: json-file
      options:
        max-size: "10m"
        max-file: "3"
""",
}


# ============================================================================
# Service fragments
# ============================================================================

_HEALTHCHECK_TIMING = """      interval: 10s
      timeout: 5s
      retries: 5
"""

_SERVICE: Dict[str, str] = {
    "postgresql": """
  db:
    image: {{ images.postgresql }}
    container_name: {{ project_name }}-db
    environment:
      {{ credentials.postgresql.user }}: {{ credentials.postgresql.user | env_ref }}
      {{ credentials.postgresql.password }}: {{ credentials.postgresql.password | env_ref }}
      {{ credentials.postgresql.database }}: {{ credentials.postgresql.database | env_ref }}
    volumes:
      - postgres-data:/var/lib/postgresql/data
    healthcheck:
      test: ["CMD-SHELL", "pg_isready -U {{ credentials.postgresql.user | env_ref(escape=True) }} -d {{ credentials.postgresql.database | env_ref(escape=True) }}"]
"""
    + _HEALTHCHECK_TIMING
    + """    restart: unless-stopped
    networks:
      - backend
""",
    "mysql": """
  db:
    image: {{ images.mysql }}
    container_name: {{ project_name }}-db
    environment:
      {{ credentials.mysql.database }}: {{ credentials.mysql.database | env_ref }}
      {{ credentials.mysql.user }}: {{ credentials.mysql.user | env_ref }}
      {{ credentials.mysql.password }}: {{ credentials.mysql.password | env_ref }}
      {{ credentials.mysql.root_password }}: {{ credentials.mysql.root_password | env_ref }}
    volumes:
      - mysql-data:/var/lib/mysql
    healthcheck:
      test: ["CMD-SHELL", "mysqladmin ping -h 127.0.0.1 -u root -p{{ credentials.mysql.root_password | env_ref(escape=True) }} --silent"]
"""
    + _HEALTHCHECK_TIMING
    + """    restart: unless-stopped
    networks:
      - backend
""",
    "mongodb": """
  db:
    image: {{ images.mongodb }}
    container_name: {{ project_name }}-db
    environment:
      {{ credentials.mongodb.user }}: {{ credentials.mongodb.user | env_ref }}
      {{ credentials.mongodb.password }}: {{ credentials.mongodb.password | env_ref }}
      {{ credentials.mongodb.database }}: {{ credentials.mongodb.database | env_ref }}
    volumes:
      - mongo-data:/data/db
    healthcheck:
      test: ["CMD", "mongosh", "--quiet", "--eval", "db.adminCommand('ping')"]
"""
    + _HEALTHCHECK_TIMING
    + """    restart: unless-stopped
    networks:
      - backend
""",
    "redis": """
  redis:
    image: {{ images.redis }}
    container_name: {{ project_name }}-redis
    command: ["redis-server", "--appendonly", "yes"]
    volumes:
      - redis-data:/data
    healthcheck:
      test: ["CMD", "redis-cli", "ping"]
"""
    + _HEALTHCHECK_TIMING
    + """    restart: unless-stopped
    networks:
      - backend
""",
    "memcached": """
  memcached:
    image: {{ images.memcached }}
    container_name: {{ project_name }}-memcached
    command: ["memcached", "-m", "64"]
    healthcheck:
      test: ["CMD-SHELL", "echo stats | nc -w 1 127.0.0.1 11211 | grep -q uptime"]
"""
    + _HEALTHCHECK_TIMING
    + """    restart: unless-stopped
    networks:
      - backend
""",
    "celery-worker": """
  worker:
    build:
      context: .
      dockerfile: Dockerfile
    image: {{ project_name }}-app
    container_name: {{ project_name }}-worker
    command: ["celery", "-A", "{{ python_module }}", "worker", "--loglevel=info"]
    env_file:
      - .env
{% with depends_on = worker_depends_on %}{% include "compose/depends-on" %}{% endwith %}
    restart: unless-stopped
    networks:
      - backend
""",
    "celery-beat": """
  beat:
    build:
      context: .
      dockerfile: Dockerfile
    image: {{ project_name }}-app
    container_name: {{ project_name }}-beat
    command: ["celery", "-A", "{{ python_module }}", "beat", "--loglevel=info"]
    env_file:
      - .env
{% with depends_on = beat_depends_on %}{% include "compose/depends-on" %}{% endwith %}
    restart: unless-stopped
    networks:
      - backend
""",
    "rq-worker": """
  worker:
    build:
      context: .
      dockerfile: Dockerfile
    image: {{ project_name }}-app
    container_name: {{ project_name }}-worker
    command: ["rq", "worker", "--with-scheduler"]
    env_file:
      - .env
{% with depends_on = worker_depends_on %}{% include "compose/depends-on" %}{% endwith %}
    restart: unless-stopped
    networks:
      - backend
""",
    "nginx": """
  nginx:
    image: {{ images.nginx }}
    container_name: {{ project_name }}-nginx
    ports:
      - "80:80"
    configs:
      - source: nginx-conf
        target: /etc/nginx/conf.d/default.conf
{% with depends_on = nginx_depends_on %}{% include "compose/depends-on" %}{% endwith %}
    healthcheck:
      test: ["CMD", "nginx", "-t"]
"""
    + _HEALTHCHECK_TIMING
    + """    restart: unless-stopped
    networks:
      - backend
""",
    "rabbitmq": """
  rabbitmq:
    image: {{ images.rabbitmq }}
    container_name: {{ project_name }}-rabbitmq
    environment:
      {{ credentials.rabbitmq.user }}: {{ credentials.rabbitmq.user | env_ref }}
      {{ credentials.rabbitmq.password }}: {{ credentials.rabbitmq.password | env_ref }}
    volumes:
      - rabbitmq-data:/var/lib/rabbitmq
    healthcheck:
      test: ["CMD", "rabbitmq-diagnostics", "-q", "ping"]
      interval: 30s
      timeout: 10s
      retries: 5
    restart: unless-stopped
    networks:
      - backend
""",
}


# ============================================================================
# .env template fragments
# ============================================================================

_ENV: Dict[str, str] = {
    "header": """# Environment for {{ project_name }}
# Copy to .env and replace every placeholder before running docker compose.
# Never commit the real .env file.
# Connection URLs repeat the service passwords; change both together.
""",
    "app": """
# --- app ---
APP_ENV={{ app_env }}
SECRET_KEY=change-me
LOG_LEVEL=info
{% if exposes_port %}
PORT={{ port }}
{% endif %}
{% if framework == "django" %}
DJANGO_SETTINGS_MODULE={{ python_module }}.settings
DJANGO_ALLOWED_HOSTS=localhost,127.0.0.1
{% elif framework == "flask" %}
FLASK_APP=app
{% endif %}
""",
    "postgresql": """
# --- postgresql ---
{{ credentials.postgresql.user }}={{ python_module }}
{{ credentials.postgresql.password }}=change-me
{{ credentials.postgresql.database }}={{ python_module }}
# Keep the password in DATABASE_URL in step with {{ credentials.postgresql.password }}.
DATABASE_URL=postgresql://{{ python_module }}:change-me@db:5432/{{ python_module }}
""",
    "mysql": """
# --- mysql ---
{{ credentials.mysql.user }}={{ python_module }}
{{ credentials.mysql.password }}=change-me
{{ credentials.mysql.root_password }}=change-me-root
{{ credentials.mysql.database }}={{ python_module }}
# Keep the password in DATABASE_URL in step with {{ credentials.mysql.password }}.
DATABASE_URL=mysql://{{ python_module }}:change-me@db:3306/{{ python_module }}
""",
    "mongodb": """
# --- mongodb ---
{{ credentials.mongodb.user }}={{ python_module }}
{{ credentials.mongodb.password }}=change-me
{{ credentials.mongodb.database }}={{ python_module }}
# Keep the password in MONGODB_URL in step with {{ credentials.mongodb.password }}.
MONGODB_URL=mongodb://{{ python_module }}:change-me@db:27017/{{ python_module }}?authSource=admin
""",
    "sqlite": """
# --- sqlite ---
DATABASE_URL=sqlite:///{{ data_dir }}/db.sqlite3
""",
    "redis": """
# --- redis ---
REDIS_URL=redis://redis:6379/0
""",
    "memcached": """
# --- memcached ---
MEMCACHED_SERVERS=memcached:11211
""",
    "celery": """
# --- celery ---
{% if celery_broker_url.startswith("amqp:") %}
# Keep the password in CELERY_BROKER_URL in step with {{ credentials.rabbitmq.password }}.
{% endif %}
CELERY_BROKER_URL={{ celery_broker_url }}
CELERY_RESULT_BACKEND={{ celery_result_backend }}
""",
    "rq": """
# --- rq ---
RQ_REDIS_URL=redis://redis:6379/0
""",
    "rabbitmq": """
# --- rabbitmq ---
{{ credentials.rabbitmq.user }}={{ python_module }}
{{ credentials.rabbitmq.password }}=change-me
""",
}


# ============================================================================
# .dockerignore
# ============================================================================

_DOCKERIGNORE: Dict[str, str] = {
    "default": """# Version control
.git
.gitignore

# Python artifacts
__pycache__/
*.py[cod]
*.egg-info/
.pytest_cache/
.mypy_cache/
.ruff_cache/
.coverage
htmlcov/
build/
dist/

# Virtual environments
.venv/
venv/

# Secrets and local configuration
.env
.env.*
!.env.example

# Docker files
Dockerfile
docker-compose*.yml
.dockerignore

# Editors and OS files
.vscode/
.idea/
*.swp
.DS_Store
""",
}


def _build_catalog() -> Mapping[FragmentKey, str]:
    sections = {
        "dockerfile": _DOCKERFILE,
        "command": _COMMAND,
        "dev-command": _DEV_COMMAND,
        "compose": _COMPOSE,
        "compose-env": _COMPOSE_ENV,
        "service": _SERVICE,
        "env": _ENV,
        "dockerignore": _DOCKERIGNORE,
    }
    catalog: Dict[FragmentKey, str] = {}
    for category, variants in sections.items():
        for variant, text in variants.items():
            catalog[FragmentKey(category, variant)] = text
    return MappingProxyType(catalog)


FRAGMENTS: Mapping[FragmentKey, str] = _build_catalog()
"""The fragment catalog. Read-only."""


def get_fragment(key: FragmentKey) -> str:
    """
    Look up a fragment's template text.

    Raises:
        TemplateIntegrityError: If the key is not in the catalog
    """
    try:
        return FRAGMENTS[key]
    except KeyError:
        raise TemplateIntegrityError(f"Unknown fragment: {key}", fragment=str(key)) from None


def list_fragments() -> List[FragmentKey]:
    """All catalog keys, sorted by category then variant."""
    return sorted(FRAGMENTS)


def loader_mapping() -> Dict[str, str]:
    """Catalog keyed by template name, for ``jinja2.DictLoader``."""
    return {key.template_name: text for key, text in FRAGMENTS.items()}
