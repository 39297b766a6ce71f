# (hook, type) -> [(priority, order, handler)]
PLUGIN_HOOKS = {}


def register_plugin_hook(hook, hook_type, handler, priority=500):
    """
    Registers a handler for a plugin hook. Handlers are called in ascending
    priority order, then in registration order. Each handler receives
    (hook, hook_type, returnvalue, params) and returns the new returnvalue;
    returning None keeps the previous one.
    """
    handlers = PLUGIN_HOOKS.setdefault((hook, hook_type), [])
    handlers.append((priority, len(handlers), handler))
    handlers.sort(key=lambda x: (x[0], x[1]))


def unregister_plugin_hook(hook, hook_type, handler):
    handlers = PLUGIN_HOOKS.get((hook, hook_type), [])
    PLUGIN_HOOKS[(hook, hook_type)] = [x for x in handlers if x[2] != handler]


def trigger_plugin_hook(hook, hook_type, params=None, returnvalue=None):
    for (_, _, handler) in PLUGIN_HOOKS.get((hook, hook_type), []):
        ret = handler(hook, hook_type, returnvalue, params)
        if ret is not None:
            returnvalue = ret

    return returnvalue
