"""
Shared fixtures for helm-gen tests
"""
import pytest

from helm_gen import logger

AGENT_MANIFESTS = '''apiVersion: v1
kind: Namespace
metadata:
  name: helm-namespace
---
apiVersion: v1
kind: ServiceAccount
metadata:
  name: workflow-agent-aaaa1111
  namespace: helm-namespace
  annotations:
    pulumi.com/autonamed: "true"
  labels:
    app.kubernetes.io/name: customer-managed-workflow-agent
---
apiVersion: v1
kind: ServiceAccount
metadata:
  name: workflow-agent-bbbb2222
  namespace: helm-namespace
  annotations:
    pulumi.com/autonamed: "true"
---
apiVersion: v1
kind: ConfigMap
metadata:
  name: agent-config
  namespace: helm-namespace
  labels:
    app.kubernetes.io/name: customer-managed-workflow-agent
data:
  PULUMI_AGENT_SERVICE_URL: "https://api.pulumi.com"
  PULUMI_AGENT_IMAGE: "pulumi/customer-managed-workflow-agent:latest"
  PULUMI_AGENT_IMAGE_PULL_POLICY: IfNotPresent
  worker-pod.json: "{}"
---
apiVersion: v1
kind: Secret
metadata:
  name: agent-secret
  namespace: helm-namespace
data:
  PULUMI_AGENT_TOKEN: cGxhY2Vob2xkZXItdG9rZW4=
---
apiVersion: rbac.authorization.k8s.io/v1
kind: Role
metadata:
  name: workflow-agent-dddd4444
  namespace: helm-namespace
  annotations:
    pulumi.com/autonamed: "true"
  labels:
    app.kubernetes.io/name: customer-managed-workflow-agent
rules:
  - apiGroups: [""]
    resources: ["pods", "pods/log", "configmaps"]
    verbs: ["create", "get", "list", "watch", "update", "delete"]
---
apiVersion: rbac.authorization.k8s.io/v1
kind: RoleBinding
metadata:
  name: workflow-agent-eeee5555
  namespace: helm-namespace
  annotations:
    pulumi.com/autonamed: "true"
  labels:
    app.kubernetes.io/name: customer-managed-workflow-agent
subjects:
  - kind: ServiceAccount
    name: workflow-agent-aaaa1111
    namespace: helm-namespace
roleRef:
  kind: Role
  name: workflow-agent-dddd4444
  apiGroup: rbac.authorization.k8s.io
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: workflow-agent-pool
  namespace: helm-namespace
  annotations:
    app.kubernetes.io/name: pulumi-workflow-agent-pool
  labels:
    app.kubernetes.io/name: customer-managed-workflow-agent
spec:
  replicas: 1
  selector:
    matchLabels:
      app.kubernetes.io/name: customer-managed-workflow-agent
  template:
    metadata:
      labels:
        app.kubernetes.io/name: customer-managed-workflow-agent
    spec:
      serviceAccountName: workflow-agent-aaaa1111
      containers:
        - name: agent
          image: "pulumi/customer-managed-workflow-agent:latest"
          imagePullPolicy: IfNotPresent
          env:
            - name: PULUMI_AGENT_SERVICE_ACCOUNT_NAME
              value: workflow-agent-bbbb2222
          ports:
            - name: http
              containerPort: 8080
              protocol: TCP
---
apiVersion: v1
kind: Service
metadata:
  name: deployment-agent-service
  namespace: helm-namespace
  labels:
    app.kubernetes.io/name: customer-managed-workflow-agent
    app.kubernetes.io/component: metrics
  annotations:
    prometheus.io/scrape: "true"
    prometheus.io/port: "8080"
    prometheus.io/path: /healthz
spec:
  type: ClusterIP
  selector:
    app.kubernetes.io/name: customer-managed-workflow-agent
  ports:
    - name: http
      port: 8080
      targetPort: 8080
      protocol: TCP
---
apiVersion: monitoring.coreos.com/v1
kind: ServiceMonitor
metadata:
  name: deployment-agent-servicemonitor
  namespace: helm-namespace
  labels:
    app.kubernetes.io/name: customer-managed-workflow-agent
spec:
  selector:
    matchLabels:
      app.kubernetes.io/name: customer-managed-workflow-agent
      app.kubernetes.io/component: metrics
  endpoints:
    - port: http
      path: /healthz
      interval: "30s"
'''

CHART_FILES = [
    'Chart.yaml',
    'values.yaml',
    '.helmignore',
    'templates/_helpers.tpl',
    'templates/NOTES.txt',
    'templates/deployment.yaml',
    'templates/configmap.yaml',
    'templates/secret.yaml',
    'templates/service.yaml',
    'templates/serviceaccount.yaml',
    'templates/worker-serviceaccount.yaml',
    'templates/role.yaml',
    'templates/rolebinding.yaml',
    'templates/servicemonitor.yaml',
]


@pytest.fixture
def manifest_dir(tmp_path):
    """Input directory holding a full set of Pulumi rendered agent manifests"""
    input_dir = tmp_path / 'input'
    input_dir.mkdir()
    (input_dir / 'manifest.yaml').write_text(AGENT_MANIFESTS)
    return input_dir


@pytest.fixture
def no_helmify(monkeypatch):
    """Pretend helmify is not installed"""
    monkeypatch.setattr('helm_gen.helmify.find_helmify', lambda: None)


@pytest.fixture(autouse=True)
def reset_verbose():
    yield
    logger.set_verbose(False)


@pytest.fixture
def make_service_account():
    """Factory for ServiceAccount documents used by name mapping tests"""
    def _make(name, autonamed=True, primary=False):
        metadata = {'name': name}
        if autonamed:
            metadata['annotations'] = {'pulumi.com/autonamed': 'true'}
        if primary:
            metadata['labels'] = {'app.kubernetes.io/name': 'customer-managed-workflow-agent'}
        return {'apiVersion': 'v1', 'kind': 'ServiceAccount', 'metadata': metadata}
    return _make


@pytest.fixture
def chart_files():
    """Every path a generated chart must contain, relative to the chart root"""
    return list(CHART_FILES)
