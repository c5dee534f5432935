from file_temp.app.core.config import settings
from file_temp.app.core.deps import get_upload_policy, get_file_storage, get_file_type_sniffer

__all__ = ['settings',
           'get_upload_policy',
           'get_file_storage',
           'get_file_type_sniffer']
