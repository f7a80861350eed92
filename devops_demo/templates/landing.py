from html import escape
from string import Template

from devops_demo.services.runtime import RuntimeInfo

LANDING_PAGE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>DevOps Demo App - Python</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: linear-gradient(135deg, #306998 0%, #4b3f72 100%);
            color: white;
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            padding: 20px;
        }

        .container {
            max-width: 800px;
            background: rgba(255, 255, 255, 0.1);
            padding: 40px;
            border-radius: 20px;
            backdrop-filter: blur(10px);
            box-shadow: 0 8px 32px 0 rgba(31, 38, 135, 0.37);
            text-align: center;
            animation: fadeIn 1s ease-in-out;
        }

        @keyframes fadeIn {
            from { opacity: 0; transform: translateY(30px); }
            to { opacity: 1; transform: translateY(0); }
        }

        h1 {
            font-size: 3em;
            margin-bottom: 20px;
            color: #FFD43B;
        }

        .version {
            background: rgba(255, 255, 255, 0.2);
            padding: 12px 24px;
            border-radius: 25px;
            font-size: 1.2em;
            margin: 20px 0;
            display: inline-block;
            border: 2px solid rgba(255, 255, 255, 0.3);
        }

        .info {
            margin: 30px 0;
            font-size: 1.1em;
            line-height: 1.8;
        }

        .tech-stack, .stats {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(140px, 1fr));
            gap: 15px;
            margin: 30px 0;
        }

        .tech-item, .stat-item {
            background: rgba(0, 0, 0, 0.2);
            padding: 12px 16px;
            border-radius: 12px;
            border: 1px solid rgba(255, 255, 255, 0.2);
        }

        .api-section {
            margin-top: 40px;
            padding: 20px;
            background: rgba(0, 0, 0, 0.2);
            border-radius: 15px;
        }

        .api-links {
            display: flex;
            gap: 15px;
            justify-content: center;
            flex-wrap: wrap;
            margin-top: 15px;
        }

        .api-link {
            background: rgba(255, 255, 255, 0.2);
            color: white;
            text-decoration: none;
            padding: 8px 16px;
            border-radius: 8px;
            border: 1px solid rgba(255, 255, 255, 0.3);
        }

        .stat-label {
            font-size: 0.8em;
            opacity: 0.8;
            margin-bottom: 5px;
        }

        .stat-value {
            font-size: 1.1em;
            font-weight: bold;
            color: #FFD43B;
        }

        @media (max-width: 600px) {
            h1 { font-size: 2em; }
            .container { padding: 20px; }
            .tech-stack { grid-template-columns: repeat(2, 1fr); }
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>🚀 DevOps Demo</h1>
        <div class="version">Version: $version</div>

        <div class="info">
            <p>🎯 <strong>Python CI/CD Pipeline Demo</strong></p>
            <p>Jenkins → Docker → Kubernetes → ArgoCD</p>
        </div>

        <div class="tech-stack">
            <div class="tech-item">🐍 Python</div>
            <div class="tech-item">⚡ FastAPI</div>
            <div class="tech-item">🐳 Docker</div>
            <div class="tech-item">☸️ Kubernetes</div>
            <div class="tech-item">🔨 Jenkins</div>
            <div class="tech-item">🔄 ArgoCD</div>
        </div>

        <div class="api-section">
            <h3>📡 API Endpoints</h3>
            <div class="api-links">
                <a href="/health" class="api-link">Health Check</a>
                <a href="/ready" class="api-link">Readiness</a>
                <a href="/metrics" class="api-link">Metrics</a>
                <a href="/api/info" class="api-link">App Info</a>
            </div>
        </div>

        <div class="stats" id="stats">
            <div class="stat-item">
                <div class="stat-label">Build Time</div>
                <div class="stat-value" id="buildTime">$build_time</div>
            </div>
            <div class="stat-item">
                <div class="stat-label">Current Time</div>
                <div class="stat-value" id="currentTime"></div>
            </div>
            <div class="stat-item">
                <div class="stat-label">Python Version</div>
                <div class="stat-value">$runtime_version</div>
            </div>
            <div class="stat-item">
                <div class="stat-label">Environment</div>
                <div class="stat-value">$environment</div>
            </div>
        </div>
    </div>

    <script>
        function updateTime() {
            document.getElementById('currentTime').textContent =
                new Date().toLocaleTimeString();
        }

        updateTime();
        setInterval(updateTime, 1000);
    </script>
</body>
</html>
""")


def render_landing_page(runtime: RuntimeInfo) -> str:
    return LANDING_PAGE.substitute(
        version=escape(runtime.version),
        build_time=escape(runtime.build_time),
        runtime_version=escape(runtime.runtime_version),
        environment=escape(runtime.environment),
    )
