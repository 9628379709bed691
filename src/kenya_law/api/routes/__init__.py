from kenya_law.api.routes.citations import citations_bp
from kenya_law.api.routes.documents import documents_bp
from kenya_law.api.routes.monitoring import monitoring_bp

__all__ = ['citations_bp', 'documents_bp', 'monitoring_bp']
