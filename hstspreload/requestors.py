import httpx


class HttpxRequestor:
    """Class to run HTTPX on a given URL."""
    def __init__(self, proxy=None, error_set=None, transport=None):
        self.proxy = proxy
        self.error_set = error_set if error_set is not None else set()
        self.transport = transport

    def run(self, url, timeout=10, method="GET", headers=None, verify=True):
        """Return (response, error); exactly one of them is set.
        Redirects are not followed: the preload list checks the header of the response itself.
        """
        r = error = None
        try:
            with httpx.Client(
                proxy=self.proxy, verify=verify, transport=self.transport
            ) as client:
                r = client.request(
                    method=method,
                    url=url,
                    timeout=timeout,
                    headers=headers,
                    follow_redirects=False,
                )
        except (httpx.ConnectError, httpx.TimeoutException) as e:
            error = e
        except httpx.HTTPError as e:
            if not repr(e) in self.error_set:
                print(f"{method} {url}: {e} -Headers: {headers}")
                self.error_set.add(repr(e))
            error = e
        return r, error

    def close(self):
        return self.error_set
