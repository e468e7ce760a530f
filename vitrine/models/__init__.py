# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant create_all() et avant que SQLAlchemy résolve la clé étrangère
# projects.type_id → project_types.type_id.

from vitrine.models.user import User  # noqa: F401
from vitrine.models.setting import Setting  # noqa: F401
from vitrine.models.about import AboutSection  # noqa: F401
from vitrine.models.team import TeamMember  # noqa: F401
from vitrine.models.project import Project, ProjectType  # noqa: F401
