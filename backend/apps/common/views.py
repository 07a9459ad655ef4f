from django.core.exceptions import ImproperlyConfigured
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _inventory_check():
    # Local import: the inventory container is only importable once apps are loaded.
    from apps.inventory.container import get_repository

    try:
        repository = get_repository()
    except ImproperlyConfigured as e:
        logger.warning('Inventory repository health check failed', error=str(e))
        return {'status': 'fail', 'error': str(e)}
    result = {
        'status': 'ok',
        'categories': repository.count_categories(),
        'products': repository.count_products(),
    }
    logger.debug('Inventory repository health check succeeded', **result)
    return result


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: the inventory repository is installed and answering."""
    checks = {'inventory': _inventory_check()}
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse({'status': overall_status, 'checks': checks}, status=http_status)
